"""
Shared test fixtures for the configurator tests.
"""
import pytest

from configurator.models import ContainerConfig, DesignContext, BoundingBox, Point3D
from configurator.core.validator import ConstraintValidator
from configurator.core.physics import MassPropertiesCalculator
from configurator.services.persistence import ConfigRepository, MemoryStore
from configurator.services.design_service import DesignSession


@pytest.fixture
def default_config():
    return ContainerConfig()


@pytest.fixture
def example_config():
    """The reference design: hopper, frame, no lid, 80% full."""
    return ContainerConfig(
        L_rect=1400, W=1300, H=900, t_wall=5, x_hopper=700,
        fill_percentage=80, include_frame=True, include_lid=False,
    )


@pytest.fixture
def validator():
    return ConstraintValidator()


@pytest.fixture
def calculator():
    return MassPropertiesCalculator()


@pytest.fixture
def context():
    return DesignContext()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(store):
    return DesignSession(repository=ConfigRepository(store))


def make_box(x0, y0, z0, x1, y1, z1):
    return BoundingBox(
        min=Point3D(x=x0, y=y0, z=z0),
        max=Point3D(x=x1, y=y1, z=z1),
    )


@pytest.fixture
def unit_box():
    return make_box(0, 0, 0, 1, 1, 1)
