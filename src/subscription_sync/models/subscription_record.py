from __future__ import annotations

from dataclasses import asdict, dataclass

"""SubscriptionRecord model.

One assembled record per usable sheet row. All fields are plain strings so
consumers can render them directly; an empty string means "not yet available".
"""

__all__ = [
    "SubscriptionRecord",
]

# snake_case field -> consumer-facing key (dashboard JSON contract)
_CAMEL_KEYS = {
    "serial_number": "serialNumber",
    "requested_date": "requestedDate",
    "company_name": "companyName",
    "subscriber_name": "subscriberName",
    "subscription_name": "subscriptionName",
    "start_date": "startDate",
    "end_date": "endDate",
    "payment_date": "paymentDate",
    "payment_method": "paymentMethod",
    "transaction_id": "transactionId",
    "payment_file": "paymentFile",
    "approval_date": "approvalDate",
    "renewal_status": "renewalStatus",
    "renewal_count": "renewalCount",
}


@dataclass(frozen=True)
class SubscriptionRecord:
    """Immutable subscription record produced by one synchronization pass."""
    id: str  # sub-<serial>-<row position>
    serial_number: str
    requested_date: str
    company_name: str
    subscriber_name: str
    subscription_name: str
    price: str
    frequency: str
    purpose: str
    status: str  # Pending / Approved / Rejected / Paid
    start_date: str
    end_date: str
    payment_date: str  # Actual 3
    payment_method: str  # 上流に列なし (常に空)
    transaction_id: str
    payment_file: str
    approval_date: str  # 承認シート未取得 (常に空)
    remarks: str
    # raw workflow trace
    actual2: str
    actual3: str
    renewal_status: str
    planned1: str
    planned2: str
    actual1: str
    renewal_count: str

    def to_dict(self) -> dict[str, str]:
        """Render with the camelCase keys the dashboard consumes."""
        return {_CAMEL_KEYS.get(k, k): v for k, v in asdict(self).items()}
