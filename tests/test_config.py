from seawater_acoustics.config import get_config
from seawater_acoustics.errors import InvalidSelector
from seawater_acoustics.tools.units import TemperatureScale
from seawater_acoustics.tools.validation import DomainPolicy
import pytest

def test_defaults():
    config = get_config()
    assert config.domain_policy is DomainPolicy.IGNORE
    assert config.temperature_scale is TemperatureScale.ITS90
    assert config.default_latitude == 45.
    assert config.log_file is None
    assert config.dpi == 300

def test_user_config_overrides_defaults(ini_file):
    path = ini_file('[validation]\ndomain_policy = warn\n\n[defaults]\nlatitude = 60\n')
    config = get_config(path)
    assert config.domain_policy is DomainPolicy.WARN
    assert config.default_latitude == 60.
    assert config.temperature_scale is TemperatureScale.ITS90

def test_invalid_policy_in_config(ini_file):
    path = ini_file('[validation]\ndomain_policy = sometimes\n')
    with pytest.raises(InvalidSelector):
        get_config(path)

def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_config(str(tmp_path / 'does_not_exist.ini'))
