# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""Class to hold the current loops and sampling grid of a field map."""

from __future__ import annotations

import json
import pprint
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from coilcalc.base.error import ConfigError
from coilcalc.base.look_and_feel import coilcalc_warn
from coilcalc.magnetostatics.current_loop import CurrentLoop
from coilcalc.magnetostatics.error import MagnetostaticsError
from coilcalc.magnetostatics.grid import SamplingGrid

__all__ = ["FieldMapConfig"]

_LOOPS_KEY = "loops"
_X_RANGE_KEY = "x_range"
_Z_RANGE_KEY = "z_range"

DEFAULT_CONFIG = {
    _LOOPS_KEY: [{"center": [0.0, 0.0, 0.0], "radius": 5.0, "current": 1.0}],
    _X_RANGE_KEY: [-30.0, 30.0, 20],
    _Z_RANGE_KEY: [-30.0, 30.0, 20],
}


def _default_loops() -> list[CurrentLoop]:
    return [CurrentLoop(**loop) for loop in DEFAULT_CONFIG[_LOOPS_KEY]]


def _default_grid() -> SamplingGrid:
    return SamplingGrid.from_ranges(
        DEFAULT_CONFIG[_X_RANGE_KEY], DEFAULT_CONFIG[_Z_RANGE_KEY]
    )


@dataclass
class FieldMapConfig:
    """
    Container for the current loops and sampling grid of a field map.

    Example
    -------

    .. code-block:: python

        config = FieldMapConfig.from_json(
            {
                "loops": [
                    {"center": [0, 0, -5], "radius": 5, "current": 1},
                    {"center": [0, 0, 5], "radius": 5, "current": 1},
                ],
                "x_range": [-30, 30, 20],
                "z_range": [-30, 30, 20],
            }
        )

    Missing entries take the default values: a single 5 mm loop carrying 1 A
    at the origin, sampled on a 20 x 20 grid spanning +/- 30 mm.
    """

    loops: list[CurrentLoop] = field(default_factory=_default_loops)
    grid: SamplingGrid = field(default_factory=_default_grid)

    def __str__(self) -> str:
        """Returns the configuration as a nicely pretty formatted string"""
        return pprint.pformat(self.to_dict(), indent=2, sort_dicts=False)

    @classmethod
    def from_json(cls, config_path: str | Path | dict) -> FieldMapConfig:
        """
        Read a configuration from a JSON file or a dict of the same data.

        Parameters
        ----------
        config_path:
            The path to the config JSON file or a dict of the data.

        Returns
        -------
        :
            The configuration

        Raises
        ------
        ConfigError
            If the data cannot be turned into current loops and a grid
        """
        config_data = cls._read_or_return(config_path)
        if not isinstance(config_data, dict):
            raise ConfigError(
                f"Configuration must be a JSON object, not: {type(config_data)}"
            )

        for key in config_data.keys() - DEFAULT_CONFIG.keys():
            coilcalc_warn(f"Unknown configuration entry '{key}' is ignored.")

        loop_data = config_data.get(_LOOPS_KEY, DEFAULT_CONFIG[_LOOPS_KEY])
        if not isinstance(loop_data, list):
            raise ConfigError(f"'{_LOOPS_KEY}' must be a list, not: {loop_data}")
        if not loop_data:
            coilcalc_warn("No current loops configured, the field will be zero.")

        loops = [cls._make_loop(i, loop) for i, loop in enumerate(loop_data)]
        try:
            grid = SamplingGrid.from_ranges(
                config_data.get(_X_RANGE_KEY, DEFAULT_CONFIG[_X_RANGE_KEY]),
                config_data.get(_Z_RANGE_KEY, DEFAULT_CONFIG[_Z_RANGE_KEY]),
            )
        except (MagnetostaticsError, TypeError, ValueError) as err:
            raise ConfigError(f"Invalid sampling grid: {err}") from err
        return cls(loops=loops, grid=grid)

    def to_dict(self) -> dict[str, Any]:
        """
        The configuration as JSON serialisable data.

        Returns
        -------
        :
            The configuration data, readable by :meth:`from_json`
        """
        return {
            _LOOPS_KEY: [
                {
                    "center": list(loop.center),
                    "radius": loop.radius,
                    "current": loop.current,
                }
                for loop in self.loops
            ],
            _X_RANGE_KEY: [self.grid.x_min, self.grid.x_max, self.grid.x_count],
            _Z_RANGE_KEY: [self.grid.z_min, self.grid.z_max, self.grid.z_count],
        }

    def to_json(self, path: str | Path):
        """
        Write the configuration to a JSON file.

        Parameters
        ----------
        path:
            The file to write to
        """
        with open(path, "w") as file:
            json.dump(self.to_dict(), file, indent=4)

    @staticmethod
    def _make_loop(index: int, loop: Any) -> CurrentLoop:
        if not isinstance(loop, dict):
            raise ConfigError(
                f"Current loop {index} must be a JSON object, not: {loop}"
            )
        try:
            return CurrentLoop(
                center=loop["center"], radius=loop["radius"], current=loop["current"]
            )
        except KeyError as err:
            raise ConfigError(f"Current loop {index} is missing {err}") from None
        except (MagnetostaticsError, TypeError, ValueError) as err:
            raise ConfigError(f"Current loop {index} is invalid: {err}") from err

    @staticmethod
    def _read_or_return(config_path: str | Path | dict) -> Any:
        if isinstance(config_path, dict):
            return config_path
        try:
            with open(config_path) as f:
                return json.load(f)
        except json.JSONDecodeError as err:
            raise ConfigError(f"Cannot parse configuration file: {err}") from err
