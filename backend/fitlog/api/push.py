import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fitlog.core.config import settings
from fitlog.core.security import get_current_user
from fitlog.db import get_db
from fitlog.models.push_subscription import PushSubscription
from fitlog.models.user import User
from fitlog.schemas.push import PushSubscriptionCreate, PushSubscriptionRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/push", tags=["push"])


@router.get("/vapid-public-key")
def vapid_public_key():
    if not settings.vapid_public_key:
        raise HTTPException(status_code=404, detail="Push notifications not configured")
    return {"public_key": settings.vapid_public_key}


@router.post("/subscriptions", response_model=PushSubscriptionRead)
def subscribe(
    payload: PushSubscriptionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    # Upsert on (user, endpoint); browsers may rotate keys for the same endpoint
    row = (
        db.query(PushSubscription)
        .filter(PushSubscription.user_id == user.id, PushSubscription.endpoint == payload.endpoint)
        .first()
    )
    if not row:
        row = PushSubscription(user_id=user.id, endpoint=payload.endpoint)
        db.add(row)
    row.p256dh = payload.keys.p256dh
    row.auth = payload.keys.auth
    db.commit()
    db.refresh(row)
    logger.info("Saved push subscription %s for user %s", row.id, user.id)
    return PushSubscriptionRead(id=row.id, endpoint=row.endpoint)


@router.delete("/subscriptions")
def unsubscribe(
    endpoint: str = Query(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    deleted = (
        db.query(PushSubscription)
        .filter(PushSubscription.user_id == user.id, PushSubscription.endpoint == endpoint)
        .delete()
    )
    db.commit()
    return {"message": "Unsubscribed", "deleted": deleted}
