"""Fixed matrices and thresholds used by the conversion chain.

Matrices are row-major and applied as ``M @ v`` on column vectors. They
are created once at import and flagged read-only.
"""
import numpy as np


def _frozen(rows) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.setflags(write=False)
    return arr


# linear sRGB (D65) -> XYZ
RGB_TO_XYZ = _frozen([
    [0.4124564390896922, 0.357576077643909, 0.18043748326639894],
    [0.21267285140562253, 0.715152155287818, 0.07217499330655958],
    [0.0193338955823293, 0.11919202588130297, 0.9503040785363679],
])

XYZ_TO_RGB = _frozen([
    [3.2404541621141045, -1.5371385127977166, -0.498531409556016],
    [-0.9692660305051868, 1.8760108454466942, 0.041556017530349834],
    [0.055643430959114726, -0.2040259135167538, 1.0572251882231791],
])

# Bradford cone response
BRADFORD = _frozen([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
])

BRADFORD_INV = _frozen([
    [0.9869929054667123, -0.14705425642099013, 0.15996265166373125],
    [0.43230526972339456, 0.5183602715367776, 0.0492912282128556],
    [-0.008528664575177328, 0.04004282165408487, 0.9684866957875502],
])

# OKLab (D65)
XYZ_TO_LMS = _frozen([
    [0.819022437996703, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
])

LMS_TO_OKLAB = _frozen([
    [0.210454268309314, 0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799, 0.450593709617411],
    [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
])

OKLAB_TO_LMS = _frozen([
    [1.0, 0.3963377773761749, 0.2158037573099136],
    [1.0, -0.1055613458156586, -0.0638541728258133],
    [1.0, -0.0894841775298119, -1.2914855480194092],
])

LMS_TO_XYZ = _frozen([
    [1.2268798758459243, -0.5578149944602171, 0.2813910456659647],
    [-0.0405757452148008, 1.112286803280317, -0.0717110580655164],
    [-0.0763729366746601, -0.4214933324022432, 1.5869240198367816],
])

# sRGB companding
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_COMPAND_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# CIE Lab
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27

BYTE_MAX = 255
