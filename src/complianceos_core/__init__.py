"""ComplianceOS Core - extension composition for the core and premium editions.

The core edition runs on its own. Installing ``complianceos_premium``
alongside it produces the premium edition: the edition resolver points
``complianceos_core.premium`` at the real module and its registrar fills
the extension slots.
"""

__version__ = "1.0.0"

from complianceos_core.application import ComplianceApplication  # noqa: E402

__all__ = ["__version__", "ComplianceApplication"]
