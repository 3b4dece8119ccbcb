# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Physical and time constants used by the frame engine"""

import numpy as np

# Angles
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians
AS2R = D2R / 3600.0            # arc seconds to radians

# Time
SECONDS_PER_DAY = 86400.0
JULIAN_CENTURY = 36525.0 * SECONDS_PER_DAY  # seconds per julian century
JD_J2000 = 2451545.0           # julian date of the J2000.0 epoch (TT)

# Time scale offsets (seconds)
TT_MINUS_TAI = 32.184          # TT - TAI, fixed
TAI_MINUS_GPS = 19.0           # TAI - GPS, fixed
TAI_MINUS_UTC_AT_GPS_EPOCH = 19.0  # TAI - UTC on 1980-01-06

# Reference epochs as (year, month, day, hour, minute, second) in their own scale
J2000_TT = [2000, 1, 1, 12, 0, 0]
GPST0 = [1980, 1, 6, 0, 0, 0]  # GPS time reference epoch
GST0 = [1999, 8, 22, 0, 0, 0]  # Galileo time reference epoch

# WGS84 ellipsoid and Earth rotation
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening
OMGE = 7.2921151467E-5         # earth angular velocity (rad/s)

# Terrestrial intermediate origin drift s' (rad per julian century),
# about -47 micro arc seconds per century (Lambert and Bizouard, 2002)
S_PRIME_RATE = -47e-6 * AS2R

# Interpolation defaults
DEFAULT_GRID_POINTS = 5
DEFAULT_GRID_STEP = 60.0       # seconds
DEFAULT_CACHE_SIZE = 50        # raw samples kept by interpolating providers

__all__ = [
    'R2D', 'D2R', 'AS2R',
    'SECONDS_PER_DAY', 'JULIAN_CENTURY', 'JD_J2000',
    'TT_MINUS_TAI', 'TAI_MINUS_GPS', 'TAI_MINUS_UTC_AT_GPS_EPOCH',
    'J2000_TT', 'GPST0', 'GST0',
    'RE_WGS84', 'FE_WGS84', 'OMGE', 'S_PRIME_RATE',
    'DEFAULT_GRID_POINTS', 'DEFAULT_GRID_STEP', 'DEFAULT_CACHE_SIZE',
]
