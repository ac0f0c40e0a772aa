import numpy as np

# hex string -> expected RGBA8
samples_hex_rgba8 = {
    "#ff0000": (255, 0, 0, 255),
    "00ff0080": (0, 255, 0, 128),
    "#F80": (255, 136, 0, 255),
    "#00f1": (0, 0, 255, 17),
    "#FFFFFF": (255, 255, 255, 255),
    "000": (0, 0, 0, 255),
    "#12345678": (0x12, 0x34, 0x56, 0x78),
    "aBcD": (0xAA, 0xBB, 0xCC, 0xDD),
}

samples_invalid_hex = [
    "invalid",
    "",
    "#",
    "#ff",
    "#fffff",
    "#fffffff",
    "#fffffffff",
    "##fff",
    "#ggg",
    " fff",
    "fff ",
    "+ff",
    "+fff",
    "ff_f",
    "0xfff",
    "٣٣٣",  # Arabic-Indic digits
]

# sRGB channel values spread over [0, 1] plus both curve breakpoints and
# their counterparts on the other side of the curve
LINEAR_BREAKPOINT = 0.0031308
SRGB_BREAKPOINT = 0.04045

samples_channels = np.concatenate([
    np.linspace(0.0, 1.0, 1001),
    np.array([
        LINEAR_BREAKPOINT,
        SRGB_BREAKPOINT,
        LINEAR_BREAKPOINT * 12.92,
        SRGB_BREAKPOINT / 12.92,
        np.nextafter(SRGB_BREAKPOINT, 0.0),
        np.nextafter(SRGB_BREAKPOINT, 1.0),
    ]),
])

# colors with distinct g and b so in-place inversion order matters
samples_rgba = [
    (0.0, 0.25, 0.75, 1.0),
    (0.2, 0.5, 0.9, 0.7),
    (1.0, 0.0, 1.0, 0.0),
    (0.123, 0.456, 0.789, 0.5),
    (0.5, 0.5, 0.5, 0.5),
    (0.9, 0.1, 0.3, 1.0),
]
