# backend/models/service_request.py
import enum
from datetime import timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from database import Base
from models.users import new_id, utcnow

# Fixed set of job states; any state may follow any other
class ServiceRequestStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    ON_HOLD = "On Hold"


# A scheduled job owned by the user who created it
class ServiceRequest(Base):
    __tablename__ = "service_requests"

    id = Column(String(32), primary_key=True, default=new_id)

    # Job and customer details, fixed after creation
    service_name = Column(String, nullable=False)
    customer_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    company_name = Column(String, nullable=False)
    assigned_to = Column(String, nullable=False)
    scheduled_date_time = Column(DateTime(timezone=True), nullable=False)

    status = Column(
        Enum(
            ServiceRequestStatus,
            name="servicerequeststatus",
            values_callable=lambda e: [m.value for m in e],
            validate_strings=True,
        ),
        nullable=False,
        default=ServiceRequestStatus.PENDING,
    )
    comments = Column(Text, nullable=True)

    # Completion evidence, stored as given
    signature = Column(Text, nullable=True) # base64 image
    audio_feedback = Column(String, nullable=True)
    video_feedback = Column(String, nullable=True)

    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    owner = relationship("User", back_populates="service_requests")

    def touch(self):
        """Refresh ``updated_at`` without ever moving it backwards."""
        now = utcnow()
        previous = self.updated_at
        if previous is not None:
            # SQLite hands back naive datetimes; they were written as UTC
            if previous.tzinfo is None:
                previous = previous.replace(tzinfo=timezone.utc)
            if previous > now:
                now = previous
        self.updated_at = now
