from seawater_acoustics.errors import ShapeMismatch
import numpy as np

def broadcast_inputs(**inputs) -> tuple:
    '''Converts all inputs to float arrays broadcast to a common shape,
    returned in the order they were passed. Raises ShapeMismatch before
    anything is computed if the shapes are not compatible.'''
    arrays = [np.asarray(value, dtype=float) for value in inputs.values()]
    try:
        return tuple(np.broadcast_arrays(*arrays))
    except ValueError:
        shapes = ', '.join(f'{name}: {a.shape}' for name, a in zip(inputs.keys(), arrays))
        raise ShapeMismatch(f'Input arrays cannot be broadcast to a common shape ({shapes}).') from None

def get_broadcast_shape(*values) -> tuple:
    shapes = [np.shape(v) for v in values if v is not None]
    try:
        return np.broadcast_shapes(*shapes)
    except ValueError:
        raise ShapeMismatch(f'Input arrays cannot be broadcast to a common shape {shapes}.') from None

def stack_contributors(*contributors) -> np.ndarray:
    '''Stacks partial results along a new trailing axis.'''
    return np.stack(np.broadcast_arrays(*contributors), axis=-1)

def to_output(values):
    '''Scalar inputs give a scalar (numpy float) result, arrays are returned as is.'''
    values = np.asarray(values, dtype=float)
    if values.ndim == 0:
        return values[()]
    return values
