#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Unit Conversion Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import pytest
from diatomic_md.units import (
    au_time_to_fs,
    bohr_to_angstrom,
    hartree_to_kelvin,
    kelvin_to_hartree,
)


class TestUnits:

    def test_kelvin_round_trip(self):
        assert hartree_to_kelvin(kelvin_to_hartree(300.0)) == pytest.approx(300.0)

    def test_length_and_time(self):
        """One bohr is about 0.529 A, one a.u. of time about 0.0242 fs."""
        assert bohr_to_angstrom(1.0) == pytest.approx(0.529177, rel=1e-6)
        assert au_time_to_fs(1000.0) == pytest.approx(24.1888, rel=1e-5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
