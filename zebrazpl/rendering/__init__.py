from .fit import fit_image, fit_image_to_label, fit_ratio, label_size_in_dots

__all__ = [
    "fit_image",
    "fit_image_to_label",
    "fit_ratio",
    "label_size_in_dots",
]
