"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Only the canvas uses Taichi, but initializing once up front avoids
    repeated ti.init() calls between tests.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def default_world():
    """A fresh default world: two concentric spheres and the default light."""
    from raytracer.scene.world import default_world

    return default_world()


@pytest.fixture
def default_material():
    from raytracer.materials.material import default_material

    return default_material()
