# kitchen/services/tags.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kitchen.core.errors import Conflict, InternalError, ValidationError
from kitchen.database import transaction
from kitchen.models.tags import Tag

logger = logging.getLogger("kitchen")


def normalize_tag_name(name: str) -> str:
    return name.strip().upper()


def parse_tag_list(raw: str | list[str] | None) -> list[str]:
    """
    Turn a comma-separated string (or a list of strings) into normalized
    tag names: trimmed, uppercased, empties dropped, first occurrence kept.
    """
    if raw is None:
        return []

    entries = raw.split(",") if isinstance(raw, str) else raw

    names = []
    for entry in entries:
        name = normalize_tag_name(entry)
        if name and name not in names:
            names.append(name)
    return names


def get_tag_by_name(db: Session, name: str) -> Tag | None:
    return db.query(Tag).filter(Tag.name == normalize_tag_name(name)).first()


def _already_exists(tag: Tag) -> Conflict:
    return Conflict("Tag already exists", payload={"tag": {"id": tag.id, "name": tag.name}})


def list_tags(db: Session) -> list[Tag]:
    return db.query(Tag).order_by(Tag.name).all()


def create_tag(db: Session, name: str | None) -> Tag:
    if name is None or not name.strip():
        raise ValidationError("Tag name is required")

    normalized = normalize_tag_name(name)

    existing = get_tag_by_name(db, normalized)
    if existing:
        raise _already_exists(existing)

    tag = Tag(name=normalized)
    try:
        with transaction(db, "Unable to create tag"):
            db.add(tag)
    except InternalError as e:
        # Lost a race against a concurrent insert of the same name
        existing = get_tag_by_name(db, normalized) if isinstance(e.__cause__, IntegrityError) else None
        if existing:
            raise _already_exists(existing) from e
        raise

    db.refresh(tag)
    logger.info(f"Created tag {tag.name} (id={tag.id})")
    return tag


def resolve_tags(db: Session, raw: str | list[str] | None) -> list[Tag]:
    """
    Look up each listed tag, creating the ones the registry does not know yet.

    Runs inside the caller's transaction; new tags are flushed, not committed.
    """
    tags = []
    for name in parse_tag_list(raw):
        tag = get_tag_by_name(db, name)
        if tag is None:
            tag = _insert_tag(db, name)
        tags.append(tag)
    return tags


def _insert_tag(db: Session, name: str) -> Tag:
    tag = Tag(name=name)
    try:
        with db.begin_nested():
            db.add(tag)
    except IntegrityError:
        # Created by a concurrent request since the lookup
        existing = get_tag_by_name(db, name)
        if existing is None:
            raise
        return existing

    logger.info(f"Created tag {tag.name} (id={tag.id})")
    return tag
