# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import pytest

from bigrational import RoundMode, get_dflt_round_mode, set_dflt_round_mode


@pytest.fixture(scope="session",
                params=[mode.name for mode in RoundMode],
                ids=[mode.name for mode in RoundMode])
def rnd(request) -> RoundMode:
    return RoundMode[request.param]


def dflt_round(mode):
    @pytest.fixture()
    def closure():
        prev_mode = get_dflt_round_mode()
        set_dflt_round_mode(mode)
        yield
        set_dflt_round_mode(prev_mode)
    return closure


with_round_half_up = dflt_round(RoundMode.HALF_UP)
with_round_half_even = dflt_round(RoundMode.HALF_EVEN)
with_round_floor = dflt_round(RoundMode.FLOOR)
