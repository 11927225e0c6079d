"""Shared dependency graph fixtures."""

import pytest

from graph_builders import configuration, module, project


@pytest.fixture
def kotlin_stdlib():
    annotations = module("org.jetbrains:annotations:13.0")
    return module("org.jetbrains.kotlin:kotlin-stdlib:1.2.30", annotations)


@pytest.fixture
def rxjava():
    reactive_streams = module("org.reactivestreams:reactive-streams:1.0.2")
    return module("io.reactivex.rxjava2:rxjava:2.1.10", reactive_streams)


@pytest.fixture
def rxandroid(rxjava):
    return module("io.reactivex.rxjava2:rxandroid:2.0.2", rxjava)


@pytest.fixture
def junit():
    hamcrest = module("org.hamcrest:hamcrest-core:1.3")
    return module("junit:junit:4.12", hamcrest)


@pytest.fixture
def single_empty():
    return project("singleempty", configuration("compileClasspath"))


@pytest.fixture
def single_project(kotlin_stdlib, rxjava):
    return project("single", configuration("compileClasspath", kotlin_stdlib, rxjava))
