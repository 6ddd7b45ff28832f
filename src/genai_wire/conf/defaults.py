"""Default configuration values for genai_wire."""

DEFAULTS: dict[str, bool] = {
    # Decode bare JSON integers into int64 fields (protobuf-JSON parsers accept
    # both forms); off by default so only quoted decimal strings are accepted.
    "ACCEPT_NUMERIC_INT64": False,
    # Passed through to ``json.dumps`` when encoding records.
    "ENSURE_ASCII": False,
}
