import logging

from sqlalchemy.orm import Session
from models.log import Log

logger = logging.getLogger(__name__)


# commit=False stages the entry in the caller's transaction so it lands (or rolls back) with the change it records
def write_log(db: Session, *, user_id, action, resource, status="SUCCESS", ip=None, meta=None, commit=True):
    entry = Log(user_id=user_id, action=action, resource=resource, status=status, ip=ip, meta=meta or {})
    db.add(entry)
    if commit:
        db.commit()
    logger.info("audit %s %s %s user=%s", action, resource, status, user_id)


def client_ip(request) -> str:
    return request.client.host if request.client else None
