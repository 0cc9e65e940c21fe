"""Shared fixtures for the test suite."""

import textwrap
from pathlib import Path

import pytest

SNAPSHOT_YAML = textwrap.dedent("""\
    packages:
      - name: com.example.shapes
        comment: Geometric shapes.
        types:
          - name: Shape
            kind: interface
            comment: A two-dimensional shape.
            methods:
              - name: area
                return_type: double
                comment: |
                  Computes the area.
                  @return the area
          - name: Circle
            comment: A circle.
            interfaces: [com.example.shapes.Shape]
            fields:
              - name: radius
                comment: The radius.
                public: false
              - name: cache
                public: false
            constructors:
              - name: Circle
                parameters:
                  - {name: radius, type: double}
            methods:
              - name: area
                return_type: double
              - name: scale
                return_type: com.example.shapes.Circle
                parameters:
                  - {name: factor, type: double}
                throws: [java.lang.IllegalArgumentException]
                comment: |
                  Scales the circle.
                  @param factor the factor
                  @return a new circle
                  @throws ArithmeticException on overflow
      - name: com.example.internal
        types:
          - name: Helper
            public: false
            methods:
              - name: help
""")


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """Write the sample snapshot to a YAML file."""
    path = tmp_path / "shapes.yaml"
    path.write_text(SNAPSHOT_YAML, encoding="utf-8")
    return path
