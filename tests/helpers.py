from sqlalchemy.orm import Session

from serial_validator.models.asset import Asset


def create_asset(db: Session, serial_number: str) -> Asset:
    a = db.get(Asset, serial_number)
    if a:
        return a
    a = Asset(serial_number=serial_number)
    db.add(a)
    db.commit()
    return a


def create_assets(db: Session, *serial_numbers: str) -> list[Asset]:
    return [create_asset(db, s) for s in serial_numbers]
