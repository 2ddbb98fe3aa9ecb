# src/subscription/models.py
import uuid
from sqlalchemy import Column, String, DateTime, Numeric, Boolean, Uuid
from database import Base
from datetime import datetime
from decimal import Decimal
from typing import Optional

class Subscription(Base):
    """Represents one recurring payment obligation."""
    __tablename__ = "subscriptions"

    id: uuid.UUID = Column(Uuid, primary_key=True, default=uuid.uuid4)
    merchant_name: str = Column(String, nullable=False, default="", index=True)
    category: str = Column(String, nullable=False, default="General")
    amount: Decimal = Column(Numeric(asdecimal=True), nullable=False, default=Decimal("0"))
    previous_amount: Decimal = Column(Numeric(asdecimal=True), nullable=False, default=Decimal("0"))  # 0 = no prior value
    billing_interval: str = Column(String, nullable=False, default="Monthly")  # Monthly, Yearly
    status: str = Column(String, nullable=False, default="Active")  # Active, Cancelled
    created_at: datetime = Column(DateTime, nullable=False, default=datetime.utcnow)
    next_billing_date: Optional[datetime] = Column(DateTime, nullable=True)
    has_price_increased: bool = Column(Boolean, nullable=False, default=False)
    monthly_equivalent: Decimal = Column(Numeric(asdecimal=True), nullable=False, default=Decimal("0"))

    def __repr__(self):
        return f"<Subscription {self.merchant_name} {self.amount} {self.billing_interval}>"
