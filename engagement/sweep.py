"""
Vectorised bearings and solver over numpy arrays.

Same formulas and the same clamp/epsilon policy as bearing.py and
spherical.py, evaluated elementwise. Useful for tabulating the reticle
separation over a grid of target directions.
"""

from __future__ import annotations

import numpy as np

from .angles import SINE_RULE_EPSILON, InvalidInputError
from .bearing import Bearing
from .vector import Vector3D


def _require_finite_array(name: str, values: np.ndarray) -> None:
    if not np.all(np.isfinite(values)):
        raise InvalidInputError(f"{name} must be finite")


def bearings_of(vectors: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Azimuth and elevation for each row of an (N, 3) array.

    Returns:
        (azimuth, elevation) arrays of shape (N,)
    """
    v = np.atleast_2d(np.asarray(vectors, dtype=float))
    if v.shape[-1] != 3:
        raise ValueError(f"Expected (N, 3) array, got shape {v.shape}")
    _require_finite_array("vectors", v)

    x, y, z = v[..., 0], v[..., 1], v[..., 2]
    horizontal = np.sqrt(x * x + y * y)
    return np.arctan2(x, y), np.arctan2(z, horizontal)


def bearings_between(observer: Vector3D, targets: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Bearings from a single observer to each target row."""
    return bearings_of(np.asarray(targets, dtype=float) - observer.to_array())


def solve_arrays(
    az_t: np.ndarray,
    el_t: np.ndarray,
    az_r: np.ndarray,
    el_r: np.ndarray
) -> dict[str, np.ndarray]:
    """
    Elementwise solver; inputs broadcast against each other.

    Returns:
        Dict with keys "j", "J", "E", "F", "G"
    """
    az_t, el_t, az_r, el_r = np.broadcast_arrays(
        *(np.asarray(a, dtype=float) for a in (az_t, el_t, az_r, el_r))
    )
    for name, arr in (("az_t", az_t), ("el_t", el_t), ("az_r", az_r), ("el_r", el_r)):
        _require_finite_array(name, arr)

    f = np.arccos(np.clip(np.cos(az_t) * np.cos(el_t), -1.0, 1.0))
    h = np.arccos(np.clip(np.cos(az_r) * np.cos(el_r), -1.0, 1.0))

    c = np.arctan2(np.tan(el_t), np.sin(az_t))
    d = np.arctan2(np.tan(el_r), np.sin(az_r))
    big_j = np.pi - c - d

    j = np.arccos(np.clip(
        np.cos(f) * np.cos(h) + np.sin(f) * np.sin(h) * np.cos(big_j), -1.0, 1.0
    ))

    e = np.arctan2(np.tan(az_r), np.sin(el_r))

    denom = np.sin(j)
    regular = np.abs(denom) > SINE_RULE_EPSILON
    safe_denom = np.where(regular, denom, 1.0)
    ratio = np.clip(np.sin(big_j) * np.sin(f) / safe_denom, -1.0, 1.0)
    big_f = np.where(regular, np.arcsin(ratio), 0.0)

    g = np.pi - e - big_f

    return {"j": j, "J": big_j, "E": e, "F": big_f, "G": g}


def separation_grid(
    reference: Bearing,
    azimuths: np.ndarray,
    elevations: np.ndarray
) -> np.ndarray:
    """
    Reticle separation j for every (elevation, azimuth) target direction.

    Returns:
        Array of shape (len(elevations), len(azimuths))
    """
    az_grid, el_grid = np.meshgrid(
        np.asarray(azimuths, dtype=float), np.asarray(elevations, dtype=float)
    )
    return solve_arrays(az_grid, el_grid, reference.azimuth, reference.elevation)["j"]
