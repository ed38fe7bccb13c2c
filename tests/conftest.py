# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from genro_slots import MarkedNode


@pytest.fixture
def icon_node():
    return MarkedNode('icon', icon=True)


@pytest.fixture
def text_node():
    return MarkedNode('text')


@pytest.fixture
def tab_nodes():
    return [MarkedNode(f'tab_{n}', tab=True) for n in range(3)]
