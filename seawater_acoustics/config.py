from seawater_acoustics.tools import log
from seawater_acoustics.tools.units import TemperatureScale
from seawater_acoustics.tools.validation import DomainPolicy, parse_selector
from dataclasses import dataclass
import configparser
import os

defaults_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'configs', 'defaults.ini')

@dataclass
class AcousticsConfig:
    domain_policy: DomainPolicy
    temperature_scale: TemperatureScale
    default_latitude: float
    log_file: str
    dpi: int

def get_config(input_path:str=None) -> AcousticsConfig:
    '''Reads the packaged defaults, overridden by the ini file at
    input_path if one is given.'''
    config = configparser.ConfigParser()
    config.read(defaults_path)
    if input_path is not None:
        if not os.path.exists(input_path):
            log.error(f'Config file does not exist: {input_path}')
            raise FileNotFoundError(f'Config file does not exist: {input_path}')
        config.read(input_path)

    domain_policy = parse_selector(DomainPolicy, config['validation']['domain_policy'].strip(), 'domain_policy')
    temperature_scale = parse_selector(TemperatureScale, config['defaults']['temperature_scale'].strip(), 'temperature_scale')
    default_latitude = float(config['defaults']['latitude'])
    log_file = config['logging']['log_file'].strip() or None
    dpi = int(config['plots']['dpi'])

    acoustics_config = AcousticsConfig(domain_policy, temperature_scale, default_latitude, log_file, dpi)

    return acoustics_config
