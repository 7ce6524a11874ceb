"""Tests for folder name normalisation and category detection."""

import pytest
from gallerygen.name_normalizer import (
    ProjectName,
    clean_folder_name,
    decode_folder_name,
    detect_category,
    has_arabic,
    normalize,
)


class TestNormalize:
    """Tests for normalize."""

    def test_english_arabic_pair(self):
        """Test splitting 'English-Arabic' at the hyphen."""
        result = normalize('Villa Compound-فيلا كومباوند')

        assert result == ProjectName(ar='فيلا كومباوند', en='Villa Compound')

    def test_pair_is_trimmed(self):
        """Test whitespace around the hyphen is removed."""
        result = normalize('  Nile Tower  -  برج النيل ')

        assert result.en == 'Nile Tower'
        assert result.ar == 'برج النيل'

    def test_only_first_hyphen_splits(self):
        """Test that later hyphens stay in the Arabic part."""
        result = normalize('Al-Ain Mall-مول العين - المرحلة الثانية')

        assert result.en == 'Al'
        assert result.ar == 'Ain Mall-مول العين - المرحلة الثانية'

    def test_english_only(self):
        """Test an English name gets an Arabic generic prefix."""
        result = normalize('Nile Tower')

        assert result.en == 'Nile Tower'
        assert result.ar == 'مشروع Nile Tower'

    @pytest.mark.parametrize('name', ['job1', 'Residential Block 7', 'A_B_C'])
    def test_no_hyphen_no_arabic(self, name):
        """Test names without hyphen or Arabic keep their English form."""
        result = normalize(name)

        assert result.en == name
        assert result.ar == 'مشروع ' + name

    def test_hyphen_without_arabic(self):
        """Test a hyphenated English name is not split."""
        result = normalize('Block-7')

        assert result.en == 'Block-7'
        assert result.ar == 'مشروع Block-7'

    def test_arabic_only(self):
        """Test an Arabic name gets an English generic prefix."""
        result = normalize('برج النيل')

        assert result.ar == 'برج النيل'
        assert result.en == 'Project برج النيل'

    def test_leading_hyphen_not_split(self):
        """Test a hyphen at position 0 does not split."""
        result = normalize('-برج')

        assert result.ar == '-برج'
        assert result.en == 'Project -برج'

    def test_percent_encoded(self):
        """Test percent-encoded names are decoded first."""
        result = normalize('Nile%20Tower-%D8%A8%D8%B1%D8%AC')

        assert result.en == 'Nile Tower'
        assert result.ar == 'برج'

    def test_whitespace_collapsed(self):
        """Test runs of whitespace become one space."""
        assert normalize('Nile    Tower').en == 'Nile Tower'

    def test_malformed_escape_falls_back(self):
        """Test an invalid UTF-8 escape leaves the name as-is."""
        result = normalize('Tower%E0%A4')

        assert result.en == 'Tower%E0%A4'

    def test_malformed_escape_not_split(self):
        """Test a partly malformed name is not decoded or split."""
        result = normalize('Tower%ZZ-%D8%A8')

        assert result.en == 'Tower%ZZ-%D8%A8'
        assert result.ar == 'مشروع Tower%ZZ-%D8%A8'

    def test_pure(self):
        """Test the same input always gives the same output."""
        assert normalize('Villa-فيلا') == normalize('Villa-فيلا')


class TestHelpers:
    """Tests for decoding helpers."""

    def test_decode_valid(self):
        assert decode_folder_name('a%20b') == 'a b'

    def test_decode_invalid_returns_raw(self):
        assert decode_folder_name('bad%FF') == 'bad%FF'

    def test_decode_mixed_malformed_and_valid_escape(self):
        """Test one malformed escape keeps the whole name raw."""
        assert decode_folder_name('Tower%ZZ-%D8%A8') == 'Tower%ZZ-%D8%A8'

    def test_decode_trailing_percent(self):
        assert decode_folder_name('100%') == '100%'

    def test_clean_double_encoded_space(self):
        """Test a literal %20 left after decoding becomes a space."""
        assert clean_folder_name('Nile%2520Tower') == 'Nile Tower'

    def test_has_arabic(self):
        assert has_arabic('abc ب') is True
        assert has_arabic('abc') is False


class TestDetectCategory:
    """Tests for detect_category."""

    @pytest.mark.parametrize('name', [
        'Commercial Center', 'Coffee SHOP', 'City Mall', 'Villa Compound-فيلا كومباوند',
        'Phosphatic and Compound Fertilizers Complex',
    ])
    def test_commercial(self, name):
        assert detect_category(name) == 'commercial'

    @pytest.mark.parametrize('name', ['Palace Restoration', 'Renovation 2020', 'Roof REPAIR'])
    def test_restoration(self, name):
        assert detect_category(name) == 'restoration'

    def test_default_residential(self):
        assert detect_category('Nile Tower') == 'residential'
        assert detect_category('برج النيل') == 'residential'

    def test_commercial_checked_first(self):
        """Test commercial keywords win over restoration keywords."""
        assert detect_category('Mall Renovation') == 'commercial'
