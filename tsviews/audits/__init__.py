"""
Parity audits of the views against vectorized pandas references.
"""

from .parity import (
    AUDIT_KINDS,
    ParityAuditResult,
    ParityResult,
    audit_view_parity,
    run_parity_audit,
)
from .vectorized_references import (
    to_pandas,
    vectorized_rolling,
    vectorized_shift,
    vectorized_span_difference,
)

__all__ = [
    "AUDIT_KINDS",
    "ParityAuditResult",
    "ParityResult",
    "audit_view_parity",
    "run_parity_audit",
    "to_pandas",
    "vectorized_rolling",
    "vectorized_shift",
    "vectorized_span_difference",
]
