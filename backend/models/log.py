from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from database import Base
from models.users import utcnow

# Audit trail of authentication and service request events
class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)

    ts = Column(DateTime(timezone=True), default=utcnow, index=True)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=True)
    action = Column(String(50), index=True)
    resource = Column(String(50), index=True)
    status = Column(String(20), index=True)
    ip = Column(String(64), nullable=True)

    # Extra context, never credentials
    meta = Column(JSON, nullable=True)

    user = relationship("User", lazy="joined", uselist=False)
