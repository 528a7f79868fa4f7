from __future__ import annotations

import pytest

from contract_extractor.config.settings import Settings, env_flag, load_settings


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_env_flag_truthy(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CONTRACT_EXTRACTOR_TEST_FLAG", value)
    assert env_flag("CONTRACT_EXTRACTOR_TEST_FLAG") is True


@pytest.mark.parametrize("value", ["0", "false", "no", "nope"])
def test_env_flag_falsy(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CONTRACT_EXTRACTOR_TEST_FLAG", value)
    assert env_flag("CONTRACT_EXTRACTOR_TEST_FLAG", default=True) is False


def test_env_flag_uses_default_when_unset_or_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CONTRACT_EXTRACTOR_TEST_FLAG", raising=False)
    assert env_flag("CONTRACT_EXTRACTOR_TEST_FLAG", default=True) is True
    monkeypatch.setenv("CONTRACT_EXTRACTOR_TEST_FLAG", "  ")
    assert env_flag("CONTRACT_EXTRACTOR_TEST_FLAG") is False


def test_load_settings_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTRACT_EXTRACTOR_SINGLE_LINE", "1")
    monkeypatch.setenv("CONTRACT_EXTRACTOR_END_MARKER", " FIN ")
    monkeypatch.setenv("CONTRACT_EXTRACTOR_VERBOSE", "true")

    assert load_settings() == Settings(single_line=True, end_marker="FIN", verbose=True)


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "CONTRACT_EXTRACTOR_SINGLE_LINE",
        "CONTRACT_EXTRACTOR_END_MARKER",
        "CONTRACT_EXTRACTOR_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)

    assert load_settings() == Settings()
