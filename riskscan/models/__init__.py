from riskscan.models.security import HolderInfo, SecurityData

__all__ = [
    "HolderInfo",
    "SecurityData",
]
