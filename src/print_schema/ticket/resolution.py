"""Page resolution feature."""

from typing import Tuple

from print_schema.document.names import psk_name

from .feature_option_pack import FeatureOptionPack


class PageResolution(FeatureOptionPack):
    """Option of the ``psk:PageResolution`` feature.

    Resolution options are usually vendor named, so there is no keyword enum.
    """

    feature_name = psk_name("PageResolution")

    def dpi(self) -> Tuple[int, int]:
        """Horizontal and vertical resolution in dots per inch, 0 when absent."""
        return self.scored_integer("ResolutionX"), self.scored_integer("ResolutionY")
