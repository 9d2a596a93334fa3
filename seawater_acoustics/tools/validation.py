from seawater_acoustics.errors import InvalidSelector, DomainError, DomainWarning
from seawater_acoustics.tools import log
from enum import Enum
import numpy as np
import inspect
import os
import warnings

class DomainPolicy(Enum):
    IGNORE = 'ignore'
    WARN = 'warn'
    RAISE = 'raise'

def parse_selector(enum_class, value, name:str):
    '''Returns the member of enum_class matching value. Accepts the member
    itself, its value (e.g. 'com', 2) or its name (case insensitive).
    Anything else raises InvalidSelector, no default is substituted.'''
    if isinstance(value, enum_class):
        return value
    if isinstance(value, np.integer):
        value = int(value)
    # bool is an int subclass: True would silently select equation 1
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        for member in enum_class:
            if isinstance(value, str) and isinstance(member.value, str):
                if value.lower() == member.value.lower():
                    return member
            elif value == member.value:
                return member
            if isinstance(value, str) and value.lower() == member.name.lower():
                return member
    options = ', '.join(repr(member.value) for member in enum_class)
    raise InvalidSelector(f'Invalid value {value!r} for {name}. Options are: {options}.')

def _get_caller_stacklevel() -> int:
    '''stacklevel for warnings.warn that points at the first frame outside
    this package, however deep inside it the warning is raised.'''
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep
    frame = inspect.currentframe()
    stacklevel = 0
    try:
        while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(package_dir):
            frame = frame.f_back
            stacklevel += 1
    finally:
        del frame
    return stacklevel

def warn_domain(message:str, log_file=None):
    log.warning(message, log_file)
    warnings.warn(message, DomainWarning, stacklevel=_get_caller_stacklevel())

def check_domain(formula:str, domain:dict, policy, log_file=None, **inputs):
    '''Compares inputs against the valid domain of a formula.
    domain maps an input name to a (min, max) tuple, either bound can be None.
    Depending on the policy, violations are ignored, warned about or raised.'''
    policy = parse_selector(DomainPolicy, policy, 'domain_policy')
    if policy is DomainPolicy.IGNORE:
        return

    violations = []
    for name, (vmin, vmax) in domain.items():
        if inputs.get(name) is None:
            continue
        values = np.asarray(inputs[name], dtype=float)
        outside = np.zeros(values.shape, dtype=bool)
        if vmin is not None:
            outside |= values < vmin
        if vmax is not None:
            outside |= values > vmax
        n_outside = np.count_nonzero(outside)
        if n_outside > 0:
            violations.append(f'{name} outside [{vmin}, {vmax}] ({n_outside} values)')

    if len(violations) == 0:
        return
    message = f'{formula} evaluated outside its valid domain: ' + '; '.join(violations)
    if policy is DomainPolicy.RAISE:
        raise DomainError(message)
    warn_domain(message, log_file)
