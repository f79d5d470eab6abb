"""
Plain Data Records

Frozen snapshots of the rows kept by the entity store. Services and
engines work exclusively with these; Django model instances never leave
the store adapter.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Tuple

from shared.domain.base import Record
from shared.domain.value_objects import DateRange


@dataclass(frozen=True)
class UserRecord(Record):
    """Identity record of a platform user."""
    first_name: str
    last_name: str
    email: str = ''
    username: str = ''


@dataclass(frozen=True)
class SpotRecord(Record):
    """A bookable listing."""
    owner_field = 'owner_id'

    owner_id: int
    address: str
    city: str
    state: str
    country: str
    lat: Decimal
    lng: Decimal
    name: str
    description: str
    price: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class SpotImageRecord(Record):
    spot_id: int
    url: str
    preview: bool = False


@dataclass(frozen=True)
class ReviewRecord(Record):
    owner_field = 'user_id'

    spot_id: int
    user_id: int
    review: str
    stars: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class BookingRecord(Record):
    """A reserved date range on a spot held by a guest."""
    owner_field = 'user_id'

    spot_id: int
    user_id: int
    start_date: date
    end_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)


@dataclass(frozen=True)
class SpotSummary(SpotRecord):
    """Spot with the derived fields shown in list views."""
    avg_rating: Optional[float] = None
    preview_image: Optional[str] = None


@dataclass(frozen=True)
class SpotDetail(SpotRecord):
    """Spot with the derived fields and relations shown in the detail view."""
    num_reviews: int = 0
    avg_star_rating: Optional[float] = None
    images: Tuple[SpotImageRecord, ...] = field(default_factory=tuple)
    owner: Optional[UserRecord] = None


@dataclass(frozen=True)
class BookingDetail(BookingRecord):
    """Booking enriched with its spot summary or guest, depending on the viewer."""
    spot: Optional[SpotSummary] = None
    user: Optional[UserRecord] = None


@dataclass(frozen=True)
class ReviewDetail(ReviewRecord):
    """Review enriched with its author, spot summary and the spot's images."""
    user: Optional[UserRecord] = None
    spot: Optional[SpotSummary] = None
