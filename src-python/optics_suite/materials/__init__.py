"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Dispersion models mapping wavelength or frequency to refractive index.
"""

from .dispersion import (
    crown_glass_index,
    water_index,
    frequency_to_color,
    frequency_to_wavelength,
    wavelength_to_frequency,
    index_curve,
    rgb_css,
    SELLMEIER_B,
    SELLMEIER_C,
)

__all__ = [
    'crown_glass_index',
    'water_index',
    'frequency_to_color',
    'frequency_to_wavelength',
    'wavelength_to_frequency',
    'index_curve',
    'rgb_css',
    'SELLMEIER_B',
    'SELLMEIER_C',
]
