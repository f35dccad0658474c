# Tile Pairing
# Copyright (C) 2025  Tile Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
# Standings points per game outcome
WIN_POINTS = 1.0
DRAW_POINTS = 0.5

# Synthetic placeholders
BYE_PLAYER_ID = "bye"
BYE_PLAYER_NAME = "BYE"

# Pairing formats
FORMAT_SWISS = "swiss"
FORMAT_FONTE_SWISS = "fonte-swiss"
FORMAT_KING_OF_HILL = "king-of-hill"
FORMAT_ROUND_ROBIN = "round-robin"
FORMAT_QUARTILE = "quartile"
FORMAT_MANUAL = "manual"
DEFAULT_FORMAT = FORMAT_SWISS

FORMAT_DESCRIPTIONS = {
    FORMAT_SWISS: "Standard Swiss system - pair players with similar records",
    FORMAT_FONTE_SWISS: "Group by wins, pair top half vs bottom half within each group",
    FORMAT_KING_OF_HILL: "Pair highest ranked vs lowest ranked players",
    FORMAT_ROUND_ROBIN: "Each player plays every other player once",
    FORMAT_QUARTILE: "Split into quartiles, pair 1st vs 2nd, 3rd vs 4th",
    FORMAT_MANUAL: "Manual pairing - set up matches yourself",
}

# Gibsonization thresholds, as a fraction of the field
DEFAULT_FIRST_PLACE_FRACTION = 0.25
DEFAULT_PODIUM_FRACTION = 0.5

DEFAULT_NUM_ROUNDS = 7

# Registration limits
MIN_RATING = 0
MAX_RATING = 3000

# Logging
LOG_FILE_ENV = "TILEPAIRING_LOG_FILE"
LOG_LEVEL_ENV = "TILEPAIRING_LOG_LEVEL"
