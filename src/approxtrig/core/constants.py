from __future__ import annotations

PI = 3.1415926535897932384626433
TWO_PI = 2.0 * PI
HALF_PI = PI / 2.0
TWO_OVER_PI = 2.0 / PI
