"""
Django adapters for the space ports

Each adapter converts between Django rows and the plain domain
dataclasses; nothing outside this module touches the space ORM models.
"""

from __future__ import annotations

from typing import Any, Mapping
import logging

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from PIL import Image as PILImage, UnidentifiedImageError

from shared.domain.exceptions import InvalidArgumentError, NotFoundError
from apps.spaces.application.ports import (
    AddressStore,
    AvailabilityStore,
    ImageStore,
    SpacePersistence,
)
from apps.spaces.domain.entities import (
    Address,
    AddressInput,
    Availability,
    AvailabilityInput,
    Image,
    Space,
)
from apps.spaces.filters import SpaceFilterSet
from apps.spaces.models import (
    Space as SpaceModel,
    SpaceAddress,
    SpaceAvailability,
    SpaceImage,
)

logger = logging.getLogger(__name__)


# ===== Row -> domain mapping =====

def address_to_domain(row: SpaceAddress) -> Address:
    return Address(
        id=row.pk,
        street=row.street,
        city=row.city,
        postal_code=row.postal_code,
        country=row.country,
        space_id=row.space_id,
    )


def availability_to_domain(row: SpaceAvailability) -> Availability:
    return Availability(
        id=row.pk,
        day_of_week=row.day_of_week,
        is_open=row.is_open,
        open_from=row.open_from,
        open_to=row.open_to,
        space_id=row.space_id,
    )


def image_to_domain(row: SpaceImage) -> Image:
    return Image(
        id=row.pk,
        file=row.image.name,
        caption=row.caption,
        url=row.image.url if row.image else '',
        uploaded_at=row.uploaded_at,
        space_id=row.space_id,
    )


def space_to_domain(row: SpaceModel) -> Space:
    try:
        address = address_to_domain(row.address)
    except SpaceAddress.DoesNotExist:
        address = None

    return Space(
        id=row.pk,
        name=row.name,
        description=row.description,
        capacity=row.capacity,
        owner_id=row.owner_id,
        daily_rate=row.daily_rate,
        conveniences=set(row.conveniences or []),
        address=address,
        availabilities=[availability_to_domain(a) for a in row.availabilities.all()],
        images=[image_to_domain(i) for i in row.images.all()],
    )


# ===== Adapters =====

class DjangoSpacePersistence(SpacePersistence):

    def _queryset(self):
        return SpaceModel.objects.select_related("address").prefetch_related("availabilities", "images")

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[Space]:
        queryset = self._queryset()
        if filters:
            filterset = SpaceFilterSet(data=filters, queryset=queryset)
            if not filterset.is_valid():
                raise InvalidArgumentError(f"Invalid space filters: {dict(filterset.errors)}")
            queryset = filterset.qs
        return [space_to_domain(row) for row in queryset]

    def find_by_id(self, space_id: int) -> Space | None:
        row = self._queryset().filter(pk=space_id).first()
        return space_to_domain(row) if row is not None else None

    def exists_by_name(self, name: str) -> bool:
        return SpaceModel.objects.filter(name=name).exists()

    def save(self, space: Space) -> Space:
        if not space.is_persisted:
            row = SpaceModel()
        else:
            row = SpaceModel.objects.filter(pk=space.id).first()
            if row is None:
                raise NotFoundError(f"Space with id {space.id} does not exist")

        row.name = space.name
        row.description = space.description
        row.capacity = space.capacity
        row.owner_id = space.owner_id
        row.daily_rate = space.daily_rate
        row.conveniences = sorted(space.conveniences)
        row.save()
        space.id = row.pk

        # Attach owned records created detached
        if space.address is not None:
            SpaceAddress.objects.filter(pk=space.address.id).update(space=row)
            space.address.space_id = row.pk

        SpaceAvailability.objects.filter(pk__in=[a.id for a in space.availabilities]).update(space=row)
        for availability in space.availabilities:
            availability.space_id = row.pk

        SpaceImage.objects.filter(pk__in=[i.id for i in space.images]).update(space=row)
        for image in space.images:
            image.space_id = row.pk

        logger.debug(f"Saved space row {row.pk} ({row.name})")
        return space

    def delete(self, space: Space) -> None:
        deleted, _ = SpaceModel.objects.filter(pk=space.id).delete()
        if not deleted:
            raise NotFoundError(f"Space with id {space.id} does not exist")


class DjangoAddressStore(AddressStore):

    def create(self, address_input: AddressInput) -> Address:
        row = SpaceAddress.objects.create(
            street=address_input.street,
            city=address_input.city,
            postal_code=address_input.postal_code,
            country=address_input.country,
        )
        return address_to_domain(row)

    def delete(self, address_id: int) -> None:
        deleted, _ = SpaceAddress.objects.filter(pk=address_id).delete()
        if not deleted:
            raise NotFoundError(f"Address with id {address_id} does not exist")


class DjangoAvailabilityStore(AvailabilityStore):

    def create(self, entry: AvailabilityInput) -> Availability:
        row = SpaceAvailability.objects.create(
            day_of_week=entry.day_of_week,
            is_open=entry.is_open,
            open_from=entry.open_from,
            open_to=entry.open_to,
        )
        return availability_to_domain(row)

    def update(self, availability: Availability) -> Availability:
        updated = SpaceAvailability.objects.filter(pk=availability.id).update(
            is_open=availability.is_open,
            open_from=availability.open_from,
            open_to=availability.open_to,
        )
        if not updated:
            raise NotFoundError(f"Availability with id {availability.id} does not exist")
        return availability

    def delete(self, availability_id: int) -> None:
        deleted, _ = SpaceAvailability.objects.filter(pk=availability_id).delete()
        if not deleted:
            raise NotFoundError(f"Availability with id {availability_id} does not exist")


class DjangoImageStore(ImageStore):
    """
    Image records backed by the configured Django file storage

    Uploads are checked with Pillow before anything is written. Stored
    files are removed only after the surrounding transaction commits, so
    a rolled back delete keeps its file; a rolled back add drops its file
    through discard_upload().
    """

    def __init__(self):
        self.max_size = getattr(settings, "COSPACE_IMAGE_MAX_SIZE", 5 * 1024 * 1024)
        self.allowed_formats = tuple(getattr(settings, "COSPACE_IMAGE_FORMATS", ("JPEG", "PNG", "WEBP")))

    def _validate_image(self, file_obj: Any) -> None:
        size = getattr(file_obj, "size", None)
        if size is not None and size > self.max_size:
            raise InvalidArgumentError(
                f"Image is too large. Maximum size is {self.max_size / 1024 / 1024:.1f} MB"
            )

        try:
            with PILImage.open(file_obj) as img:
                img_format = img.format
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise InvalidArgumentError(f"Invalid image: {e}") from e
        finally:
            if hasattr(file_obj, "seek"):
                file_obj.seek(0)

        if img_format not in self.allowed_formats:
            raise InvalidArgumentError(f"Unsupported image format: {img_format}")

    def add(self, file: Any, caption: str) -> Image:
        self._validate_image(file)
        row = SpaceImage.objects.create(image=file, caption=caption)
        logger.debug(f"Stored image {row.pk} as {row.image.name}")
        return image_to_domain(row)

    def get_by_id(self, image_id: int) -> Image | None:
        row = SpaceImage.objects.filter(pk=image_id).first()
        return image_to_domain(row) if row is not None else None

    def delete(self, image_id: int) -> None:
        row = SpaceImage.objects.filter(pk=image_id).first()
        if row is None:
            raise NotFoundError(f"Image with id {image_id} does not exist")

        file_name = row.image.name
        storage = row.image.storage
        row.delete()

        if file_name:
            transaction.on_commit(lambda: storage.delete(file_name))

    def discard_upload(self, image: Image) -> None:
        if not image.file:
            return
        storage = SpaceImage._meta.get_field("image").storage
        storage.delete(image.file)
        logger.debug(f"Discarded stored file {image.file} of image {image.id}")
