from seawater_acoustics.errors import MissingInput
from seawater_acoustics.tools.arrays import get_broadcast_shape
from dataclasses import dataclass, fields

@dataclass
class PhysicalSample:
    '''Measured or estimated properties of seawater. Any field can be a
    scalar or an array, all given fields must broadcast to a common shape.

    t: temperature [degC], on the scale t_scale (None: configured default)
    s: salinity [ppt]
    p: gauge pressure [dbar]
    z: depth [m]
    f: frequency [kHz]
    pH: acidity [-]
    lat: latitude [deg]'''
    t: object = None
    s: object = None
    p: object = None
    z: object = None
    f: object = None
    pH: object = None
    lat: object = None
    t_scale: str = None

    def __post_init__(self):
        self.shape = get_broadcast_shape(*[getattr(self, name) for name in self.input_names()])

    @staticmethod
    def input_names() -> list:
        return [field.name for field in fields(PhysicalSample) if field.name != 't_scale']

    def get_inputs(self, names, defaults:dict=None) -> dict:
        '''Returns {name: value} for the requested inputs, falling back to
        defaults for missing ones. Raises MissingInput otherwise.'''
        defaults = defaults or {}
        inputs = {}
        missing = []
        for name in names:
            value = getattr(self, name)
            if value is None:
                value = defaults.get(name)
            if value is None:
                missing.append(name)
            inputs[name] = value
        if missing:
            raise MissingInput(f'Sample is missing required input(s): {", ".join(missing)}')
        return inputs
