"""Component logger for edition, registry, flag and capability events."""

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

from complianceos_core.logging.colors import (
    COMPONENT_COLORS,
    CYAN,
    LIGHT_BLUE,
    RED,
    RESET,
    YELLOW,
)
from complianceos_core.types import LogFormat, LogLevel

COMPONENTS = ("edition", "registry", "flags", "capability")


@dataclass
class LogConfig:
    """Logger configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.COLORED
    show_context: bool = True
    truncate_at: int = 200
    components: dict[str, bool] = field(default_factory=dict)
    output: TextIO = field(default=sys.stdout)

    def __post_init__(self) -> None:
        """Enable every component not explicitly configured."""
        for component in COMPONENTS:
            self.components.setdefault(component, True)


class ComplianceLogger:
    """Main logger facade. Creates component-specific loggers."""

    def __init__(self, config: LogConfig | None = None):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration (defaults to LogConfig())
        """
        self.config = config or LogConfig()
        self._level_order = {
            LogLevel.DEBUG: 0,
            LogLevel.INFO: 1,
            LogLevel.WARN: 2,
            LogLevel.ERROR: 3,
        }

    def edition(self) -> "EditionLogger":
        return EditionLogger(self)

    def registry(self) -> "RegistryLogger":
        return RegistryLogger(self)

    def flags(self) -> "FlagLogger":
        return FlagLogger(self)

    def capability(self) -> "CapabilityLogger":
        return CapabilityLogger(self)

    def configure(self, config: LogConfig) -> None:
        """Update configuration (for hot-reload)."""
        self.config = config

    def _should_log(self, level: LogLevel) -> bool:
        return self._level_order.get(level, 0) >= self._level_order.get(self.config.level, 1)

    def _log(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Internal logging method.

        Args:
            level: Log level
            component: Component name (edition, registry, flags, capability)
            message: Log message
            context: Additional context data
        """
        if not self._should_log(level):
            return

        if not self.config.components.get(component, True):
            return

        if self.config.format == LogFormat.JSON:
            self._log_json(level, component, message, context)
        else:
            self._log_colored(level, component, message, context)

    def _log_json(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": level.value,
            "component": component,
            "message": message,
        }
        if context:
            log_entry.update(context)

        print(json.dumps(log_entry, default=str), file=self.config.output)

    def _log_colored(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        level_colors = {
            LogLevel.DEBUG: LIGHT_BLUE,
            LogLevel.INFO: CYAN,
            LogLevel.WARN: YELLOW,
            LogLevel.ERROR: RED,
        }

        color = level_colors.get(level, RESET)
        component_color = COMPONENT_COLORS.get(component, RESET)

        # Format: [COMPONENT] message
        output = f"{component_color}[{component.upper()}]{RESET} {color}{message}{RESET}"

        if context and self.config.show_context:
            context_str = str(context)
            if len(context_str) > self.config.truncate_at:
                context_str = context_str[: self.config.truncate_at] + "..."
            output += f" {LIGHT_BLUE}{context_str}{RESET}"

        print(output, file=self.config.output)


class EditionLogger:
    """Logger for edition resolution events."""

    def __init__(self, parent: ComplianceLogger):
        self.parent = parent

    def resolved(self, edition: str, module_name: str, present: bool, disabled: bool) -> None:
        """Log the edition decision."""
        context = {
            "event": "edition_resolved",
            "edition": edition,
            "module": module_name,
            "present": present,
            "disabled": disabled,
        }
        if disabled and present:
            message = f"Edition '{edition}': '{module_name}' installed but force-disabled"
        elif present:
            message = f"Edition '{edition}': '{module_name}' installed"
        else:
            message = f"Edition '{edition}': '{module_name}' not installed, using stubs"
        self.parent._log(LogLevel.INFO, "edition", message, context)

    def failed(self, error: Exception) -> None:
        """Log a fatal edition error (shape mismatch, broken module)."""
        context = {
            "event": "edition_failed",
            "error": str(error),
            "error_type": type(error).__name__,
        }
        self.parent._log(LogLevel.ERROR, "edition", f"Edition resolution failed: {error}", context)


class RegistryLogger:
    """Logger for slot registry lifecycle events."""

    def __init__(self, parent: ComplianceLogger):
        self.parent = parent

    def registrar_installed(self, name: str, slot_counts: dict[str, int]) -> None:
        total = sum(slot_counts.values())
        context = {"event": "registrar_installed", "registrar": name, "slots": slot_counts}
        message = f"Registrar '{name}' installed ({total} components) ✓"
        self.parent._log(LogLevel.INFO, "registry", message, context)

    def registrar_skipped(self, name: str) -> None:
        context = {"event": "registrar_skipped", "registrar": name}
        message = f"Registrar '{name}' already installed, skipping duplicate registration"
        self.parent._log(LogLevel.WARN, "registry", message, context)


class FlagLogger:
    """Logger for feature flag administration."""

    def __init__(self, parent: ComplianceLogger):
        self.parent = parent

    def override_set(self, tenant_id: str, changes: dict[str, bool]) -> None:
        context = {"event": "flag_override", "tenant_id": tenant_id, "changes": changes}
        message = f"Flag override updated for tenant '{tenant_id}'"
        self.parent._log(LogLevel.INFO, "flags", message, context)

    def override_cleared(self, tenant_id: str) -> None:
        context = {"event": "flag_override_cleared", "tenant_id": tenant_id}
        message = f"Flag override cleared for tenant '{tenant_id}'"
        self.parent._log(LogLevel.INFO, "flags", message, context)


class CapabilityLogger:
    """Logger for capability checks.

    Unavailable capabilities are an expected outcome and are logged at
    INFO, never at ERROR.
    """

    def __init__(self, parent: ComplianceLogger):
        self.parent = parent

    def unavailable(self, capability: str, tenant_id: str | None, reason: str) -> None:
        context = {
            "event": "capability_unavailable",
            "capability": capability,
            "tenant_id": tenant_id,
            "reason": reason,
        }
        message = f"Capability '{capability}' unavailable ({reason})"
        self.parent._log(LogLevel.INFO, "capability", message, context)
