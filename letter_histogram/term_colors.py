import colorsys
import hashlib

import colorful as cf

HUE_MIN = 0.1

# colorize() emits raw 24-bit escapes, so cf.reset must not degrade to ""
cf.use_true_colors()


def term_color_hsv(h: float, s: float, v: float) -> str:
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    r, g, b = int(r * 255), int(g * 255), int(b * 255)
    return f"\x1b[38;2;{r};{g};{b}m"


def char_color(c: str) -> str:
    # hue is a pure function of the character so colors are stable across runs
    digest = hashlib.sha256(c.encode("utf-8", "surrogatepass")).digest()
    scaled = int.from_bytes(digest, "little") / ((1 << (len(digest) * 8)) - 1)
    scaled = HUE_MIN + (scaled * (1 - HUE_MIN))
    return term_color_hsv(scaled, 1, 1)


def colorize(s: str, color: str) -> str:
    return f"{color}{s}{cf.reset}"


def dim(s: str) -> str:
    return colorize(s, term_color_hsv(0, 0, 0.6))
