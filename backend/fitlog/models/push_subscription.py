from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from fitlog.db import Base


class PushSubscription(Base):
    __tablename__ = "push_subscriptions"
    __table_args__ = (UniqueConstraint("user_id", "endpoint", name="uq_push_user_endpoint"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    endpoint = Column(String, nullable=False)
    p256dh = Column(String, nullable=False)  # base64url client public key
    auth = Column(String, nullable=False)    # base64url auth secret

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
