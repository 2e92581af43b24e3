"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    Boolean,
    Integer,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from mindtrade.repositories.sqlalchemy.database import Base
from mindtrade.domain.models.enums import TradeAction


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DecisionORM(Base):
    """SQLAlchemy model for Decision."""

    __tablename__ = "decisions"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    ticker_symbol = Column(String(20), nullable=False)
    action = Column(SqlEnum(TradeAction), nullable=False)
    shares = Column(Numeric(precision=18, scale=8), nullable=False)
    price_per_share = Column(Numeric(precision=18, scale=4), nullable=False)
    based_on_fundamentals = Column(Boolean, nullable=False, default=False)
    fits_strategy = Column(Boolean, nullable=False, default=False)
    not_reacting_to_news = Column(Boolean, nullable=False, default=False)
    emotional_state = Column(Integer, nullable=False, default=50)
    decision_date = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)


class PortfolioORM(Base):
    """SQLAlchemy model for Portfolio."""

    __tablename__ = "portfolios"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    trades = relationship(
        "TradeORM",
        back_populates="portfolio",
        cascade="all, delete-orphan",
    )


class TradeORM(Base):
    """SQLAlchemy model for Trade."""

    __tablename__ = "trades"

    id = Column(String(36), primary_key=True)
    portfolio_id = Column(String(36), ForeignKey("portfolios.id"), nullable=False, index=True)
    ticker_symbol = Column(String(20), nullable=False)
    company_name = Column(String(255), nullable=True)
    action = Column(SqlEnum(TradeAction), nullable=False)
    shares = Column(Numeric(precision=18, scale=8), nullable=False)
    price_per_share = Column(Numeric(precision=18, scale=4), nullable=False)
    trade_date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    portfolio = relationship("PortfolioORM", back_populates="trades")


class WatchlistORM(Base):
    """SQLAlchemy model for WatchlistItem."""

    __tablename__ = "watchlists"
    __table_args__ = (UniqueConstraint("user_id", "ticker_symbol"),)

    id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    ticker_symbol = Column(String(20), nullable=False)
    added_at = Column(DateTime, nullable=False, default=_utcnow)


class KeyValueORM(Base):
    """Durable string key-value pairs (backs the response cache)."""

    __tablename__ = "kv_store"

    key = Column(String(512), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
