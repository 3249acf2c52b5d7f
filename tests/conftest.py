"""Pytest configuration and shared fixtures for extension-stubgen tests."""

import logging
from collections.abc import Generator

import pytest

from extension_stubgen.metadata import (
    BuiltinType,
    ClassMetadata,
    ConstantMetadata,
    FunctionMetadata,
    LiteralValue,
    MethodMetadata,
    ModuleMetadata,
    NamedType,
    ParameterMetadata,
    PropertyMetadata,
    UnresolvedValue,
)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None]:
    """Undo logging configuration applied by CLI commands.

    setup_logging() stops the package logger from propagating, which would
    hide records from caplog in later tests.
    """
    yield

    package_logger = logging.getLogger("extension_stubgen")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def greeter_module() -> ModuleMetadata:
    """Module with one namespaced class App\\Greeter and a hello() method."""
    return ModuleMetadata(
        name="greeter",
        classes=[
            ClassMetadata(
                name="App\\Greeter",
                methods=[
                    MethodMetadata(
                        name="hello",
                        parameters=[
                            ParameterMetadata(
                                name="name",
                                type=BuiltinType(name="string"),
                                optional=True,
                                default=LiteralValue(value="x"),
                            )
                        ],
                    )
                ],
            )
        ],
    )


@pytest.fixture
def sample_module() -> ModuleMetadata:
    """Module mixing global and namespaced constants, functions and classes."""
    return ModuleMetadata(
        name="sample",
        version="1.2.0",
        constants=[
            ConstantMetadata(name="SAMPLE_DEBUG", value=LiteralValue(value=True)),
            ConstantMetadata(
                name="Sample\\Net\\TIMEOUT", value=LiteralValue(value=30)
            ),
            ConstantMetadata(
                name="SAMPLE_MAX", value=UnresolvedValue(expression="PHP_INT_MAX")
            ),
        ],
        functions=[
            FunctionMetadata(
                name="sample_open",
                doc_comment="/**\n * Opens a handle.\n */",
                parameters=[
                    ParameterMetadata(name="path", type=BuiltinType(name="string")),
                    ParameterMetadata(
                        name="flags", type=BuiltinType(name="int"), optional=True
                    ),
                ],
                return_type=NamedType(name="Sample\\Handle", nullable=True),
            ),
            FunctionMetadata(name="Sample\\Net\\resolve"),
        ],
        classes=[
            ClassMetadata(
                name="Sample\\Handle",
                kind="class",
                is_final=True,
                interfaces=["Countable"],
                properties=[
                    PropertyMetadata(
                        name="path", visibility="public", type=BuiltinType(name="string")
                    ),
                ],
                methods=[
                    MethodMetadata(name="count", return_type=BuiltinType(name="int")),
                    MethodMetadata(
                        name="close",
                        return_type=BuiltinType(name="void"),
                        declaring_class="Sample\\Base",
                    ),
                ],
            ),
            ClassMetadata(
                name="Sample\\Net\\Socket",
                kind="interface",
                methods=[
                    MethodMetadata(
                        name="send",
                        is_abstract=True,
                        parameters=[
                            ParameterMetadata(name="data", type=BuiltinType(name="string"))
                        ],
                    )
                ],
            ),
        ],
    )
