"""Users app package.

Space owners and members who book desks. Authentication itself is
delegated to JWT tokens issued by ``rest_framework_simplejwt``.
"""
