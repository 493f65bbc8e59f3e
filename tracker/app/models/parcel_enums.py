"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.

    Only REGISTERED is special: address edits and deletion are allowed
    while a parcel is registered and never afterwards. The stored column
    is a plain string, so values outside this enum are accepted too.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
