"""In-memory reference lists searched without a backing table."""

COUNTRIES: tuple[dict[str, str], ...] = tuple(
    {"id": code, "code": code, "name": name}
    for code, name in (
        ("AG", "Antigua and Barbuda"),
        ("AR", "Argentina"),
        ("AU", "Australia"),
        ("BB", "Barbados"),
        ("BS", "Bahamas"),
        ("BZ", "Belize"),
        ("BR", "Brazil"),
        ("CA", "Canada"),
        ("CN", "China"),
        ("CO", "Colombia"),
        ("DE", "Germany"),
        ("DM", "Dominica"),
        ("DO", "Dominican Republic"),
        ("ES", "Spain"),
        ("FR", "France"),
        ("GB", "United Kingdom"),
        ("GD", "Grenada"),
        ("GH", "Ghana"),
        ("GY", "Guyana"),
        ("HT", "Haiti"),
        ("IE", "Ireland"),
        ("IN", "India"),
        ("IT", "Italy"),
        ("JM", "Jamaica"),
        ("JP", "Japan"),
        ("KE", "Kenya"),
        ("KN", "Saint Kitts and Nevis"),
        ("LC", "Saint Lucia"),
        ("MX", "Mexico"),
        ("NG", "Nigeria"),
        ("NL", "Netherlands"),
        ("PH", "Philippines"),
        ("PT", "Portugal"),
        ("SR", "Suriname"),
        ("TT", "Trinidad and Tobago"),
        ("US", "United States"),
        ("VC", "Saint Vincent and the Grenadines"),
        ("ZA", "South Africa"),
    )
)

LANGUAGES: tuple[dict[str, str], ...] = tuple(
    {"id": code, "code": code, "name": name}
    for code, name in (
        ("ar", "Arabic"),
        ("de", "German"),
        ("en", "English"),
        ("es", "Spanish"),
        ("fr", "French"),
        ("hi", "Hindi"),
        ("it", "Italian"),
        ("ja", "Japanese"),
        ("nl", "Dutch"),
        ("pap", "Papiamento"),
        ("pt", "Portuguese"),
        ("ht", "Haitian Creole"),
        ("sw", "Swahili"),
        ("tl", "Tagalog"),
        ("yo", "Yoruba"),
        ("zh", "Chinese"),
    )
)
