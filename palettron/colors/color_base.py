from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self, Callable, Union
from abc import ABC

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..conversions import convert, np_convert, FormatType
from ..types.format_type import format_classes, format_valid_dtypes, default_format_dtypes, HUE_360
from ..types.color_types import ColorElement, ColorValue, Scalar, ScalarVector, ColorSpace, is_hue_space
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → no new attributes

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, value: ColorValue | ColorBase) -> None:
        if self.num_channels != get_dimension(self.maxima):
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- ColorBase input: copy or convert ----
        if isinstance(value, ColorBase):
            value = self._from_color(value)

        if isinstance(value, ndarray):
            value = self._validate_array(value)
        else:
            value = self._validate_scalar(value)

        self._value = value
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _from_color(self, other: ColorBase) -> ColorValue:
        if other.mode == self.mode and other.format_type == self.format_type:
            return other.value
        if isinstance(other.value, ndarray):
            return np_convert(other.value, other.mode, self.mode, other.format_type, self.format_type)
        return convert(other.value, other.mode, self.mode, other.format_type, self.format_type)

    def _validate_array(self, arr: ndarray) -> ndarray:
        valid_types = format_valid_dtypes[self.format_type]
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                f"got {arr.dtype}"
            )
        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise ValueError(
                f"{self.mode} expects last dimension to be {self.num_channels}, got shape {arr.shape}"
            )

        maxima = np.array(self.maxima, dtype=float)
        if self.has_hue:
            hue = np.mod(arr[..., :1], HUE_360)
            rest = np.clip(arr[..., 1:], 0, maxima[1:])
            arr = np.concatenate([hue, rest], axis=-1)
        else:
            arr = np.clip(arr, 0, maxima)

        target_dtype = default_format_dtypes[self.format_type]
        if arr.dtype != target_dtype:
            arr = arr.astype(target_dtype)
        # callers never get a writable view into our state
        arr.flags.writeable = False
        return arr

    def _validate_scalar(self, value: Any) -> ColorElement:
        if isinstance(value, str):
            raise TypeError(f"{self.__class__.__name__} expects numeric channels, got a string")
        if get_dimension(self.maxima) != get_dimension(value):
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

        cast_type = format_classes[self.format_type]
        if not isinstance(self.maxima, tuple):
            return clamp(cast_type(value), 0, self.maxima)

        channels = [cast_type(v) for v in cast(Tuple[Any, ...], value)]
        maxima = cast(Tuple[Scalar, ...], self.maxima)
        bounded = []
        for i, (v, m) in enumerate(zip(channels, maxima)):
            if i == 0 and self.has_hue:
                bounded.append(cast_type(cyclic_wrap_float(v, 0, m)))
            else:
                bounded.append(clamp(v, 0, m))
        return tuple(bounded)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: ColorValue

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """Alpha channel value; an array when the color holds an array."""
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    def with_alpha(self, alpha: Union[Scalar, ndarray]) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value(s). Can be scalar or array matching shape.

        Returns:
            New color instance with updated alpha.
        """
        if isinstance(self.value, ndarray):
            if isinstance(alpha, ndarray) and alpha.shape != self.value.shape[:-1]:
                raise ValueError(
                    f"Alpha shape {alpha.shape} doesn't match color shape {self.value.shape[:-1]}"
                )
            a = np.broadcast_to(np.clip(alpha, 0, self.alpha_max), self.value.shape[:-1])
            new_vals = np.concatenate([self.value[..., :-1], a[..., None]], axis=-1)
        else:
            if isinstance(alpha, ndarray):
                raise TypeError("Cannot use array alpha with scalar color value")
            values = cast(ScalarVector, self.value)
            new_vals = values[:-1] + (clamp(alpha, 0, self.alpha_max),)

        return self.__class__(new_vals)  # type: ignore[call-arg]


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
