"""Seeded 3D gradient noise with wrapping and fractal variants.

Implements the revised (2002) improved-noise algorithm with a fixed
permutation table: values are continuous, vary with period 1 and are
exactly zero at integer lattice points.
"""

from __future__ import annotations

import math

__all__ = [
    "noise3",
    "noise3_wrap_nonpow2",
    "ridge_noise3",
    "fbm_noise3",
    "turbulence_noise3",
]

_PERMUTATION = bytes(
    (
        23, 125, 161, 52, 103, 117, 70, 37, 247, 101, 203, 169, 124, 126, 44, 123,
        152, 238, 145, 45, 171, 114, 253, 10, 192, 136, 4, 157, 249, 30, 35, 72,
        175, 63, 77, 90, 181, 16, 96, 111, 133, 104, 75, 162, 93, 56, 66, 240,
        8, 50, 84, 229, 49, 210, 173, 239, 141, 1, 87, 18, 2, 198, 143, 57,
        225, 160, 58, 217, 168, 206, 245, 204, 199, 6, 73, 60, 20, 230, 211, 233,
        94, 200, 88, 9, 74, 155, 33, 15, 219, 130, 226, 202, 83, 236, 42, 172,
        165, 218, 55, 222, 46, 107, 98, 154, 109, 67, 196, 178, 127, 158, 13, 243,
        65, 79, 166, 248, 25, 224, 115, 80, 68, 51, 184, 128, 232, 208, 151, 122,
        26, 212, 105, 43, 179, 213, 235, 148, 146, 89, 14, 195, 28, 78, 112, 76,
        250, 47, 24, 251, 140, 108, 186, 190, 228, 170, 183, 139, 39, 188, 244, 246,
        132, 48, 119, 144, 180, 138, 134, 193, 82, 182, 120, 121, 86, 220, 209, 3,
        91, 241, 149, 85, 205, 150, 113, 216, 31, 100, 41, 164, 177, 214, 153, 231,
        38, 71, 185, 174, 97, 201, 29, 95, 7, 92, 54, 254, 191, 118, 34, 221,
        131, 11, 163, 99, 234, 81, 227, 147, 156, 176, 17, 142, 69, 12, 110, 62,
        27, 255, 0, 194, 59, 116, 242, 252, 19, 21, 187, 53, 207, 129, 64, 135,
        61, 40, 167, 237, 102, 223, 106, 159, 197, 189, 215, 137, 36, 32, 22, 5,
    )
)

# Gradient indices chosen so that the twelve gradients are used with
# near-uniform frequency.
_GRADIENT_INDEX = bytes(
    (
        7, 9, 5, 0, 11, 1, 6, 9, 3, 9, 11, 1, 8, 10, 4, 7,
        8, 6, 1, 5, 3, 10, 9, 10, 0, 8, 4, 1, 5, 2, 7, 8,
        7, 11, 9, 10, 1, 0, 4, 7, 5, 0, 11, 6, 1, 4, 2, 8,
        8, 10, 4, 9, 9, 2, 5, 7, 9, 1, 7, 2, 2, 6, 11, 5,
        5, 4, 6, 9, 0, 1, 1, 0, 7, 6, 9, 8, 4, 10, 3, 1,
        2, 8, 8, 9, 10, 11, 5, 11, 11, 2, 6, 10, 3, 4, 2, 4,
        9, 10, 3, 2, 6, 3, 6, 10, 5, 3, 4, 10, 11, 2, 9, 11,
        1, 11, 10, 4, 9, 4, 11, 0, 4, 11, 4, 0, 0, 0, 7, 6,
        10, 4, 1, 3, 11, 5, 3, 4, 2, 9, 1, 3, 0, 1, 8, 0,
        6, 7, 8, 7, 0, 4, 6, 10, 8, 2, 3, 11, 11, 8, 0, 2,
        4, 8, 3, 0, 0, 10, 6, 1, 2, 2, 4, 5, 6, 0, 1, 3,
        11, 9, 5, 5, 9, 6, 9, 8, 3, 8, 1, 8, 9, 6, 9, 11,
        10, 7, 5, 6, 5, 9, 1, 3, 7, 0, 2, 10, 11, 2, 6, 1,
        3, 11, 7, 7, 2, 1, 7, 3, 0, 8, 1, 1, 5, 0, 6, 10,
        11, 11, 0, 2, 7, 0, 10, 8, 3, 5, 7, 1, 11, 1, 0, 7,
        9, 0, 11, 5, 10, 3, 2, 3, 5, 9, 7, 9, 8, 4, 6, 5,
    )
)

# Doubled so that a lookup of (table value + offset) never needs a mask.
_RANDTAB = _PERMUTATION * 2
_GRADTAB = _GRADIENT_INDEX * 2

_GRADIENTS = (
    (1, 1, 0),
    (-1, 1, 0),
    (1, -1, 0),
    (-1, -1, 0),
    (1, 0, 1),
    (-1, 0, 1),
    (1, 0, -1),
    (-1, 0, -1),
    (0, 1, 1),
    (0, -1, 1),
    (0, 1, -1),
    (0, -1, -1),
)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _ease(t: float) -> float:
    return ((t * 6 - 15) * t + 10) * t * t * t


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    gx, gy, gz = _GRADIENTS[_GRADTAB[hash_value]]
    return gx * x + gy * y + gz * z


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    return int(math.fmod(a, b))


def _blend(
    x: float,
    y: float,
    z: float,
    corners: tuple[int, int, int, int],
    z0: int,
    z1: int,
) -> float:
    """Interpolate the eight corner gradients; x, y, z are cell-local."""
    r00, r01, r10, r11 = corners
    u, v, w = _ease(x), _ease(y), _ease(z)

    n00 = _lerp(_grad(r00 + z0, x, y, z), _grad(r00 + z1, x, y, z - 1), w)
    n01 = _lerp(_grad(r01 + z0, x, y - 1, z), _grad(r01 + z1, x, y - 1, z - 1), w)
    n10 = _lerp(_grad(r10 + z0, x - 1, y, z), _grad(r10 + z1, x - 1, y, z - 1), w)
    n11 = _lerp(
        _grad(r11 + z0, x - 1, y - 1, z), _grad(r11 + z1, x - 1, y - 1, z - 1), w
    )

    n0 = _lerp(n00, n01, v)
    n1 = _lerp(n10, n11, v)
    return _lerp(n0, n1, u)


def noise3(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """Noise value at (x, y, z).

    Wrap values must be powers of two (0 means no explicit wrap); the
    noise always repeats every 256 units. Only the low 8 bits of the seed
    are used.
    """
    seed &= 0xFF
    x_mask = (x_wrap - 1) & 255
    y_mask = (y_wrap - 1) & 255
    z_mask = (z_wrap - 1) & 255

    px, py, pz = math.floor(x), math.floor(y), math.floor(z)
    x0, x1 = px & x_mask, (px + 1) & x_mask
    y0, y1 = py & y_mask, (py + 1) & y_mask
    z0, z1 = pz & z_mask, (pz + 1) & z_mask

    r0 = _RANDTAB[x0 + seed]
    r1 = _RANDTAB[x1 + seed]
    corners = (
        _RANDTAB[r0 + y0],
        _RANDTAB[r0 + y1],
        _RANDTAB[r1 + y0],
        _RANDTAB[r1 + y1],
    )
    return _blend(x - px, y - py, z - pz, corners, z0, z1)


def noise3_wrap_nonpow2(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """Noise value that wraps at arbitrary periods (0 means 256)."""
    seed &= 0xFF
    x_period = x_wrap or 256
    y_period = y_wrap or 256
    z_period = z_wrap or 256

    px, py, pz = math.floor(x), math.floor(y), math.floor(z)

    def cell(p: int, period: int) -> tuple[int, int]:
        c0 = _c_mod(p, period)
        if c0 < 0:
            c0 += period
        return c0, _c_mod(c0 + 1, period)

    x0, x1 = cell(px, x_period)
    y0, y1 = cell(py, y_period)
    z0, z1 = cell(pz, z_period)

    r0 = _RANDTAB[_RANDTAB[x0] + seed]
    r1 = _RANDTAB[_RANDTAB[x1] + seed]
    corners = (
        _RANDTAB[r0 + y0],
        _RANDTAB[r0 + y1],
        _RANDTAB[r1 + y0],
        _RANDTAB[r1 + y1],
    )
    return _blend(x - px, y - py, z - pz, corners, z0, z1)


def _octaves(x: float, y: float, z: float, lacunarity: float, octaves: int):
    """Yield raw noise for each octave, seeded by the octave number."""
    frequency = 1.0
    for octave in range(octaves):
        yield noise3(x * frequency, y * frequency, z * frequency, 0, 0, 0, octave)
        frequency *= lacunarity


def ridge_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    offset: float,
    octaves: int,
) -> float:
    """Ridged multifractal noise."""
    prev = 1.0
    amplitude = 0.5
    total = 0.0
    for value in _octaves(x, y, z, lacunarity, octaves):
        r = offset - abs(value)
        r *= r
        total += r * amplitude * prev
        prev = r
        amplitude *= gain
    return total


def fbm_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    octaves: int,
) -> float:
    """Fractional Brownian motion: a weighted sum of octaves."""
    amplitude = 1.0
    total = 0.0
    for value in _octaves(x, y, z, lacunarity, octaves):
        total += value * amplitude
        amplitude *= gain
    return total


def turbulence_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    octaves: int,
) -> float:
    """Turbulence: a weighted sum of absolute octave values."""
    amplitude = 1.0
    total = 0.0
    for value in _octaves(x, y, z, lacunarity, octaves):
        total += abs(value * amplitude)
        amplitude *= gain
    return total