"""Round-robin pairing for individual players."""

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

from tilepairing.constants import FORMAT_ROUND_ROBIN
from tilepairing.pairing.swiss import SwissPairing


class RoundRobinPairing(SwissPairing):
    """Swiss pairing with rematch avoidance always on.

    Each round pairs players who have not met yet, which is the only thing
    this format promises; the caller's rematch setting is ignored.
    """

    name = FORMAT_ROUND_ROBIN
    forces_rematch_avoidance = True
