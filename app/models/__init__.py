from app.models.soldier import Soldier, SoldierStatus
from app.models.fingerprint_verification import FingerprintVerification

__all__ = ["Soldier", "SoldierStatus", "FingerprintVerification"]
