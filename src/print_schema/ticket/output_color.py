"""Page output color feature."""

from print_schema.document.names import psk_name

from .feature_option_pack import FeatureOptionPack, PredefinedName


class PredefinedPageOutputColor(PredefinedName):
    Color = "Color"
    Grayscale = "Grayscale"
    # black only
    Monochrome = "Monochrome"


class PageOutputColor(FeatureOptionPack):
    """Option of the ``psk:PageOutputColor`` feature."""

    feature_name = psk_name("PageOutputColor")
    predefined_names = PredefinedPageOutputColor
