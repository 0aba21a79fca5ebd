"""API views for the reservations domain."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.permissions import is_staff
from .serializers import ReservationSerializer, ReservationWriteSerializer
from .services import get_reservation_service


class IsReservationHolderOrStaff(permissions.BasePermission):
    """Users see and change their own reservations; staff see all."""

    def has_object_permission(self, request, view, obj):  # type: ignore
        return is_staff(request.user) or obj.user_id == request.user.id


class ReservationViewSet(viewsets.ViewSet):
    """Desk reservations. Prices are always computed on the server."""

    permission_classes = [permissions.IsAuthenticated, IsReservationHolderOrStaff]
    lookup_value_regex = r"\d+"

    def get_service(self):  # type: ignore
        return get_reservation_service()

    def get_reservation(self, pk):  # type: ignore
        reservation = self.get_service().get_by_id(int(pk))
        self.check_object_permissions(self.request, reservation)
        return reservation

    def _command(self, request, default_user_id):  # type: ignore
        serializer = ReservationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command(default_user_id=default_user_id)
        if command.user_id != request.user.id and not is_staff(request.user):
            raise PermissionDenied("You can only book desks for yourself.")
        return command

    def list(self, request):  # type: ignore
        filters = request.query_params.copy()
        if not is_staff(request.user):
            filters["user"] = str(request.user.id)
        reservations = self.get_service().get_all(filters=filters)
        return Response(ReservationSerializer(reservations, many=True).data)

    @action(detail=False, methods=["get"], url_path="mine")
    def mine(self, request):  # type: ignore
        reservations = self.get_service().list_for_user(request.user.id)
        return Response(ReservationSerializer(reservations, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"space/(?P<space_id>\d+)")
    def for_space(self, request, space_id=None):  # type: ignore
        """Every reservation of one space; for its owner and staff."""
        service = self.get_service()
        space = service.get_space(int(space_id))
        if space.owner_id != request.user.id and not is_staff(request.user):
            raise PermissionDenied("Only the owner of the space can see its reservations.")
        reservations = service.list_for_space(space.id)
        return Response(ReservationSerializer(reservations, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        reservation = self.get_reservation(pk)
        return Response(ReservationSerializer(reservation).data)

    def create(self, request):  # type: ignore
        command = self._command(request, request.user.id)
        reservation = self.get_service().create(command)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        current = self.get_reservation(pk)
        command = self._command(request, current.user_id)
        reservation = self.get_service().update(int(pk), command)
        return Response(ReservationSerializer(reservation).data)

    def destroy(self, request, pk=None):  # type: ignore
        self.get_reservation(pk)
        deleted = self.get_service().delete(int(pk))
        return Response(ReservationSerializer(deleted).data)
