"""
Entity Store Port

The persistence interface every service receives explicitly. It offers
transactional create/read/update/delete over users, spots, spot images,
reviews and bookings and only ever hands out plain records.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Mapping, Optional, TYPE_CHECKING

from shared.application.uow import AbstractUnitOfWork
from shared.domain.records import (
    BookingRecord,
    ReviewRecord,
    SpotImageRecord,
    SpotRecord,
    UserRecord,
)
from shared.domain.value_objects import DateRange

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.spots.filters import ListingQuery


class EntityStore(ABC):
    """Persistence port for the marketplace entities."""

    @abstractmethod
    def atomic(self) -> AbstractUnitOfWork:
        """Start a unit of work; reads and writes inside it commit together."""

    # --- users ----------------------------------------------------------
    @abstractmethod
    def get_users(self, user_ids: Iterable[int]) -> Dict[int, UserRecord]:
        """Users keyed by id; unknown ids are left out."""

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self.get_users([user_id]).get(user_id)

    # --- spots ----------------------------------------------------------
    @abstractmethod
    def get_spot(self, spot_id: int, *, lock: bool = False) -> Optional[SpotRecord]:
        """
        Fetch one spot.

        With ``lock`` the row stays locked until the surrounding unit of
        work ends, so concurrent writers for the same spot queue up.
        """

    @abstractmethod
    def get_spots(self, spot_ids: Iterable[int]) -> Dict[int, SpotRecord]:
        """Spots keyed by id; unknown ids are left out."""

    @abstractmethod
    def filter_spots(self, query: 'ListingQuery') -> List[SpotRecord]:
        """One page of spots matching the listing query, ordered by id."""

    @abstractmethod
    def spots_owned_by(self, owner_id: int) -> List[SpotRecord]:
        pass

    @abstractmethod
    def create_spot(self, owner_id: int, fields: Mapping) -> SpotRecord:
        pass

    @abstractmethod
    def update_spot(self, spot_id: int, patch: Mapping) -> SpotRecord:
        pass

    @abstractmethod
    def delete_spot_cascade(self, spot_id: int) -> None:
        """Delete the spot with its bookings, reviews and images in one transaction."""

    # --- spot images ----------------------------------------------------
    @abstractmethod
    def images_for_spots(self, spot_ids: Iterable[int], *, preview_only: bool = False) -> List[SpotImageRecord]:
        """Images of all given spots in one fetch, ordered by id."""

    @abstractmethod
    def create_spot_image(self, spot_id: int, url: str, preview: bool) -> SpotImageRecord:
        pass

    # --- reviews --------------------------------------------------------
    @abstractmethod
    def reviews_for_spots(self, spot_ids: Iterable[int]) -> List[ReviewRecord]:
        """Reviews of all given spots in one fetch, ordered by id."""

    @abstractmethod
    def reviews_by_user(self, user_id: int) -> List[ReviewRecord]:
        pass

    @abstractmethod
    def get_review(self, review_id: int) -> Optional[ReviewRecord]:
        pass

    @abstractmethod
    def find_review(self, spot_id: int, user_id: int) -> Optional[ReviewRecord]:
        pass

    @abstractmethod
    def create_review(self, spot_id: int, user_id: int, review: str, stars: int) -> ReviewRecord:
        pass

    @abstractmethod
    def update_review(self, review_id: int, patch: Mapping) -> ReviewRecord:
        pass

    @abstractmethod
    def delete_review(self, review_id: int) -> None:
        pass

    # --- bookings -------------------------------------------------------
    @abstractmethod
    def bookings_for_spot(self, spot_id: int) -> List[BookingRecord]:
        """All bookings of a spot ordered by start date."""

    @abstractmethod
    def bookings_by_user(self, user_id: int) -> List[BookingRecord]:
        pass

    @abstractmethod
    def get_booking(self, booking_id: int) -> Optional[BookingRecord]:
        pass

    @abstractmethod
    def create_booking(self, spot_id: int, user_id: int, dates: DateRange) -> BookingRecord:
        pass

    @abstractmethod
    def update_booking(self, booking_id: int, dates: DateRange) -> BookingRecord:
        pass

    @abstractmethod
    def delete_booking(self, booking_id: int) -> None:
        pass
