#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Element Catalog Tests
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
from diatomic_md.elements import ELEMENT_CATALOG, available_elements, lookup
from diatomic_md.errors import ElementNotSupported


class TestElementCatalog:
    """Tests for element lookup."""

    def test_lookup_known(self):
        """Catalog entries are returned by symbol."""
        props = lookup("Ar")
        assert props.symbol == "Ar"
        assert props.mass == pytest.approx(3.641021e+04)

    def test_lookup_unknown(self):
        """Unknown symbols raise a typed error carrying the tag."""
        with pytest.raises(ElementNotSupported) as excinfo:
            lookup("Xe")
        assert excinfo.value.element == "Xe"

    def test_lookup_is_case_sensitive(self):
        with pytest.raises(ElementNotSupported):
            lookup("hg")

    def test_model_constants(self):
        """Each element defines the constants of its models only."""
        assert lookup("H").has_morse
        assert not lookup("H").has_lennard_jones
        assert lookup("Hg").has_lennard_jones
        assert not lookup("Hg").has_morse

    def test_lj_minimum_matches_equilibrium(self):
        """For LJ elements the bond length is the potential minimum."""
        for symbol in ("Hg", "Ar"):
            props = lookup(symbol)
            assert props.lj_minimum == pytest.approx(props.equilibrium_separation)

    def test_properties_immutable(self):
        """Catalog entries cannot be modified."""
        with pytest.raises(AttributeError):
            lookup("H").mass = 1.0

    def test_available_elements(self):
        assert available_elements() == list(ELEMENT_CATALOG)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
