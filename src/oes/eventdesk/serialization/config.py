"""Serialization used internally for configuration."""
from collections.abc import Sequence
from typing import Tuple, get_args, get_origin

from cattrs import Converter
from oes.eventdesk.models.event import EventType, parse_event_type

converter = Converter()


# Sequence[T] is structured as tuple[T, ...]
def structure_sequence(c, v, t):
    args = get_args(t)
    return c.structure(v, Tuple[args[0], ...])


def structure_event_type(v, t):
    if isinstance(v, EventType):
        return v
    elif not isinstance(v, str):
        raise TypeError(f"Invalid event type: {v!r}")

    return parse_event_type(v)


def configure_converter(c: Converter):
    c.register_structure_hook_func(
        lambda cls: get_origin(cls) is Sequence,
        lambda v, t: structure_sequence(c, v, t),
    )
    c.register_structure_hook(EventType, structure_event_type)
    c.register_unstructure_hook(EventType, lambda v: v.value)


configure_converter(converter)
