from __future__ import annotations

import copy
import pickle

import pytest

from appconfig import (
    ENV,
    NOT_FOUND,
    EnvRef,
    EnvRefWithDefault,
    Found,
    LiteralValue,
    NotFound,
    classify,
    env,
)


def test_env_builds_indicator_tuples():
    assert env("VAR") == (ENV, "VAR")
    assert env("VAR", None) == (ENV, "VAR", None)

    with pytest.raises(TypeError):
        env("VAR", 1, 2)


def test_classify_recognises_indicators():
    assert classify((ENV, "VAR")) == EnvRef("VAR")
    assert classify((ENV, "VAR", [1])) == EnvRefWithDefault("VAR", [1])
    assert classify(EnvRef("VAR")) == EnvRef("VAR")


def test_classify_treats_other_values_as_literals():
    for raw in ["ENV", 1, None, ("ENV", "VAR"), (ENV,), (ENV, 1), (ENV, "V", 1, 2)]:
        assert classify(raw) == LiteralValue(raw)


def test_results_truthiness():
    assert Found(None)
    assert Found(False)
    assert not NOT_FOUND
    assert NotFound() is NOT_FOUND


def test_markers_survive_copy_and_pickle():
    assert copy.deepcopy((ENV, "VAR"))[0] is ENV
    assert pickle.loads(pickle.dumps(ENV)) is ENV
    assert pickle.loads(pickle.dumps(NOT_FOUND)) is NOT_FOUND
