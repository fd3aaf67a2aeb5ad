"""
Global test configuration and fixtures
"""

import pytest

from codegraph_decl.builder import DeclarationBuilder
from codegraph_decl.config import RenderConfig
from codegraph_decl.models import AccessFlags, CallableDescriptor, ParameterDescriptor


@pytest.fixture
def render_config() -> RenderConfig:
    """Default rendering configuration"""
    return RenderConfig()


@pytest.fixture
def builder(render_config) -> DeclarationBuilder:
    """Builder with the default configuration"""
    return DeclarationBuilder(render_config)


@pytest.fixture
def add_callable() -> CallableDescriptor:
    """public Int32 Add(Int32 a, Int32 b)"""
    return CallableDescriptor(
        name="Add",
        return_type="Int32",
        access=AccessFlags.PUBLIC,
        parameters=(
            ParameterDescriptor(name="a", type_name="Int32"),
            ParameterDescriptor(name="b", type_name="Int32"),
        ),
    )


# Pytest hooks
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")


def _under_tests_dir(item, name: str) -> bool:
    """tests/<name>/ 경로 세그먼트 확인"""
    parts = item.path.parts
    return any(parts[i : i + 2] == ("tests", name) for i in range(len(parts) - 1))


def pytest_collection_modifyitems(config, items):
    """경로 기반 자동 마커 추가"""
    for item in items:
        if _under_tests_dir(item, "unit"):
            item.add_marker(pytest.mark.unit)
        elif _under_tests_dir(item, "integration"):
            item.add_marker(pytest.mark.integration)
