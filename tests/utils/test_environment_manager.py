import logging
from unittest.mock import patch

from primegen.utils import EnvironmentManager, EnvironmentVariables, EnvVarType, SystemSpecs


def test_defaults_when_unset(monkeypatch):
    """Test that unset variables fall back to the enum defaults."""
    for env_var in EnvironmentVariables:
        monkeypatch.delenv(env_var.env_name, raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.MAX_ATTEMPTS) == 0
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "WARNING"

def test_override_default(monkeypatch):
    """Test that an override replaces the enum default."""
    monkeypatch.delenv("PARALLELISM_DIVISOR", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR, 4) == 4

def test_values_are_converted(monkeypatch):
    """Test type conversion of set variables."""
    monkeypatch.setenv("PRIMEGEN_MAX_ATTEMPTS", "250")
    monkeypatch.setenv("PRIMEGEN_LOG_LEVEL", "debug")
    assert EnvironmentManager.get_int(EnvironmentVariables.MAX_ATTEMPTS) == 250
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "debug"

def test_invalid_int_falls_back_with_warning(monkeypatch, caplog):
    """Test that an unparseable integer logs a warning and uses the default."""
    monkeypatch.setenv("PRIMEGEN_MAX_ATTEMPTS", "lots")
    with caplog.at_level(logging.WARNING, logger="primegen.utils.EnvironmentManager"):
        assert EnvironmentManager.get_int(EnvironmentVariables.MAX_ATTEMPTS) == 0
    assert "PRIMEGEN_MAX_ATTEMPTS" in caplog.text

def test_num_parallel_processes(monkeypatch):
    """Test the worker count for several divisors."""
    with patch("multiprocessing.cpu_count", return_value=8):
        monkeypatch.setenv("PARALLELISM_DIVISOR", "2")
        assert SystemSpecs.get_num_parallel_processes() == 4
        monkeypatch.setenv("PARALLELISM_DIVISOR", "16")
        assert SystemSpecs.get_num_parallel_processes() == 1
        monkeypatch.setenv("PARALLELISM_DIVISOR", "0")
        assert SystemSpecs.get_num_parallel_processes() == 8

def test_max_attempts(monkeypatch):
    """Test that zero means unbounded and positive values are returned."""
    monkeypatch.delenv("PRIMEGEN_MAX_ATTEMPTS", raising=False)
    assert SystemSpecs.get_max_attempts() is None
    monkeypatch.setenv("PRIMEGEN_MAX_ATTEMPTS", "10")
    assert SystemSpecs.get_max_attempts() == 10

def test_settings_are_int_or_string(monkeypatch):
    """Test that every declared setting is read by a typed getter with a default of its type."""
    assert set(EnvVarType) == {EnvVarType.INT, EnvVarType.STRING}
    for env_var in EnvironmentVariables:
        monkeypatch.delenv(env_var.env_name, raising=False)
        if env_var.var_type == EnvVarType.INT:
            assert isinstance(EnvironmentManager.get_int(env_var), int)
        else:
            assert isinstance(EnvironmentManager.get_string(env_var), str)

def test_string_setting_is_returned_verbatim(monkeypatch):
    """Test that string settings are not converted."""
    monkeypatch.setenv("PRIMEGEN_LOG_LEVEL", "1")
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "1"
