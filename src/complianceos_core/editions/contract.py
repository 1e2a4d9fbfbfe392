"""Shape verification for the premium module.

The installed premium module must expose every surface function with the
same signature as the stub, plus its registrar. Differences are reported
together so one failed build shows every problem.
"""

import inspect
from types import ModuleType

from complianceos_core.errors import create_error
from complianceos_core.premium import PREMIUM_SURFACE, REGISTRAR_NAME
from complianceos_core.premium import stub as stub_module


def _parameters(func: object) -> list[tuple[str, str, bool]]:
    signature = inspect.signature(func)  # type: ignore[arg-type]
    return [
        (p.name, p.kind.name, p.default is not inspect.Parameter.empty)
        for p in signature.parameters.values()
    ]


def _describe(params: list[tuple[str, str, bool]]) -> str:
    return ", ".join(f"{name}=..." if optional else name for name, _, optional in params)


def find_shape_problems(module: ModuleType, stub: ModuleType = stub_module) -> list[str]:
    """List every way ``module`` differs from the stub surface.

    Checked per surface name: presence, callability, coroutine-ness,
    parameter names, kinds and which parameters are optional. The
    registrar must also be present and callable.
    """
    problems: list[str] = []

    for name in PREMIUM_SURFACE:
        expected = getattr(stub, name)
        actual = getattr(module, name, None)

        if actual is None:
            problems.append(f"missing '{name}'")
            continue
        if not callable(actual):
            problems.append(f"'{name}' is not callable")
            continue

        if inspect.iscoroutinefunction(expected) != inspect.iscoroutinefunction(actual):
            if inspect.iscoroutinefunction(expected):
                problems.append(f"'{name}' must be a coroutine function")
            else:
                problems.append(f"'{name}' must be a plain function")

        try:
            actual_params = _parameters(actual)
        except (TypeError, ValueError):
            problems.append(f"'{name}' has no inspectable signature")
            continue

        expected_params = _parameters(expected)
        if actual_params != expected_params:
            problems.append(
                f"'{name}' signature ({_describe(actual_params)}) "
                f"does not match ({_describe(expected_params)})"
            )

    registrar = getattr(module, REGISTRAR_NAME, None)
    if registrar is None:
        problems.append(f"missing registrar '{REGISTRAR_NAME}'")
    elif not callable(registrar):
        problems.append(f"registrar '{REGISTRAR_NAME}' is not callable")

    return problems


def verify_shape(module: ModuleType, stub: ModuleType = stub_module) -> None:
    """Raise EDITION_SHAPE_MISMATCH if ``module`` does not match the stub.

    Raises:
        ComplianceError: EDITION_SHAPE_MISMATCH listing every difference
    """
    problems = find_shape_problems(module, stub)
    if problems:
        raise create_error(
            "EDITION_SHAPE_MISMATCH",
            module=module.__name__,
            detail="; ".join(problems),
        )
