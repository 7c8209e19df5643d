from __future__ import annotations

from models.country_guess import CountryGuess


# Ordered country inference table for applicant phone numbers. The first rule
# whose keyword appears in the lowercased location (and whose prefix, when set,
# starts the digit string) wins. Rules without a prefix match on the location
# alone. The prefix requirements are historical and uneven across countries;
# keep them as they are.
COUNTRY_RULES: tuple[CountryGuess, ...] = (
    CountryGuess(
        region="GB",
        keywords=("uk", "london", "ipswich", "united kingdom", "england"),
        required_prefix="44",
    ),
    CountryGuess(region="CZ", keywords=("czech republic", "prague"), required_prefix="420"),
    CountryGuess(region="IN", keywords=("mumbai", "india", "bangalore"), required_prefix="91"),
    CountryGuess(region="BR", keywords=("brazil",)),
    CountryGuess(region="BE", keywords=("belgium",)),
    CountryGuess(region="RO", keywords=("romania",), required_prefix="40"),
    CountryGuess(region="NG", keywords=("nigeria",)),
    CountryGuess(region="AT", keywords=("austria",)),
    CountryGuess(region="AU", keywords=("australia",), required_prefix="61"),
    CountryGuess(region="LK", keywords=("sri lanka",), required_prefix="94"),
    CountryGuess(region="SI", keywords=("slovenia",), required_prefix="386"),
    CountryGuess(region="FR", keywords=("france",), required_prefix="33"),
    CountryGuess(region="NL", keywords=("netherlands",), required_prefix="31"),
    CountryGuess(region="TW", keywords=("taiwan",)),
    CountryGuess(region="NZ", keywords=("new zealand",)),
    CountryGuess(region="IT", keywords=("maragno", "italy")),
    CountryGuess(region="KE", keywords=("nairobi", "kenya")),
    CountryGuess(region="AE", keywords=("dubai",)),
    CountryGuess(region="PL", keywords=("poland",)),
    CountryGuess(region="PT", keywords=("portugal",)),
    CountryGuess(region="DE", keywords=("berlin", "germany")),
    CountryGuess(region="BJ", keywords=("benin",), required_prefix="229"),
    CountryGuess(region="IL", keywords=("israel",)),
    CountryGuess(region="ES", keywords=("spain",)),
)
