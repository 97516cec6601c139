from .ptp import PtpResult, resolve_ptp
from .cac import CacResult, classify_cac
from .assessment import Assessment, assess

__all__ = ["PtpResult", "resolve_ptp", "CacResult", "classify_cac", "Assessment", "assess"]
