from pydantic import BaseModel


class PushKeys(BaseModel):
    p256dh: str
    auth: str


class PushSubscriptionCreate(BaseModel):
    """Shape of a browser PushSubscription serialized with toJSON()."""

    endpoint: str
    keys: PushKeys


class PushSubscriptionRead(BaseModel):
    id: int
    endpoint: str
