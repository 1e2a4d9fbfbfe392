"""Run the ComplianceOS API server: ``python -m complianceos_core``."""

import asyncio

from complianceos_core.application import ComplianceApplication


def main() -> None:
    asyncio.run(ComplianceApplication().start())


if __name__ == "__main__":
    main()
