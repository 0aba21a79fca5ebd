"""Space API views."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.permissions import is_staff
from .serializers import (
    ImageSerializer,
    ImageUploadSerializer,
    OpenDaysQuerySerializer,
    OpenDaysSerializer,
    SpaceSerializer,
    SpaceWriteSerializer,
)
from .services import get_space_lifecycle_manager


class IsSpaceOwnerOrStaff(permissions.BasePermission):
    """Only the owner of a space or staff may change it."""

    def has_object_permission(self, request, view, obj):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        return is_staff(user) or obj.owner_id == user.id


class SpaceViewSet(viewsets.ViewSet):
    """
    Spaces with their weekly calendar, address and images.

    Object permissions are checked by the lifecycle manager on the space
    it loads for the write, inside the same transaction. Domain errors
    are rendered by ``shared.api.exception_handler``.
    """

    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsSpaceOwnerOrStaff]
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    lookup_value_regex = r"\d+"

    def get_manager(self):  # type: ignore
        return get_space_lifecycle_manager()

    def authorize(self, space):  # type: ignore
        self.check_object_permissions(self.request, space)

    def _command(self, request):  # type: ignore
        serializer = SpaceWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command()
        if command.owner_id != request.user.id and not is_staff(request.user):
            raise PermissionDenied("You can only own spaces yourself.")
        return command

    def list(self, request):  # type: ignore
        spaces = self.get_manager().get_all(filters=request.query_params)
        return Response(SpaceSerializer(spaces, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        space = self.get_manager().get_by_id(int(pk))
        return Response(SpaceSerializer(space).data)

    def create(self, request):  # type: ignore
        space = self.get_manager().create(self._command(request))
        return Response(SpaceSerializer(space).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        command = self._command(request)
        space = self.get_manager().update(int(pk), command, authorize=self.authorize)
        return Response(SpaceSerializer(space).data)

    def destroy(self, request, pk=None):  # type: ignore
        deleted = self.get_manager().delete(int(pk), authorize=self.authorize)
        return Response(SpaceSerializer(deleted).data)

    @action(detail=True, methods=["post"], url_path="images")
    def add_image(self, request, pk=None):  # type: ignore
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        image = self.get_manager().add_image(
            int(pk),
            serializer.validated_data["image"],
            serializer.validated_data["caption"],
            authorize=self.authorize,
        )
        return Response(ImageSerializer(image).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["delete"], url_path=r"images/(?P<image_id>\d+)")
    def delete_image(self, request, pk=None, image_id=None):  # type: ignore
        image = self.get_manager().delete_image(int(pk), int(image_id), authorize=self.authorize)
        return Response(ImageSerializer(image).data)

    @action(detail=True, methods=["get"], url_path="open-days")
    def open_days(self, request, pk=None):  # type: ignore
        query = OpenDaysQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        start = query.validated_data["start"]
        end = query.validated_data["end"]

        dates = self.get_manager().open_dates(int(pk), start, end)
        payload = {
            "space_id": int(pk),
            "start": start,
            "end": end,
            "open_days": len(dates),
            "dates": dates,
        }
        return Response(OpenDaysSerializer(payload).data)
