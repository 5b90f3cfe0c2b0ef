"""Main entry point for batch decoding of network device secrets."""

import json
import logging
import sys
from typing import Optional
from pathlib import Path
from shared.config.config import config
from shared.domain.consts import ResultStatus
from shared.domain.models import DecodeRequest, DecodeResult
from codec.services.secret_codec import SecretCodec

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

MISSING_FIELDS_REASON = "expected '<scheme> <encoded_text>'"


def parse_line(line: str) -> Optional[DecodeRequest]:
    """Split an input line into a request; None if either part is missing."""
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        return None
    scheme, encoded_text = parts
    return DecodeRequest(encoded_text=encoded_text.strip(), scheme=scheme)


def load_requests_from_file(filename: str) -> tuple[list[DecodeRequest], list[str]]:
    """
    Load decode requests from file.

    Returns:
        Tuple of (requests, invalid_lines) - blank lines are skipped
    """
    requests = []
    invalid_lines = []

    try:
        with open(filename, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                if not line.strip():
                    continue

                request = parse_line(line)
                if request is None:
                    logger.warning(f"Line {line_num}: {MISSING_FIELDS_REASON}")
                    invalid_lines.append(line.strip())
                    continue

                requests.append(request)

    except FileNotFoundError:
        logger.error(f"Input file not found: {filename}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading input file: {e}")
        sys.exit(1)

    return requests, invalid_lines


def result_entry(scheme: str, encoded_text: str, result: DecodeResult) -> dict:
    """Build the JSON output entry for one decoded line."""
    return {
        "scheme": scheme,
        "encoded": encoded_text,
        "status": result.status.value,
        "plaintext": result.plaintext,
        "reason": result.failure_reason,
    }


def write_output(entries: list[dict], output_file: str) -> None:
    """Write entries as a JSON list, creating the parent directory if needed."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(entries, f, indent=2)


def main() -> None:
    """Main execution function."""
    if len(sys.argv) < 2:
        print("Usage: python main.py <input_file>")
        sys.exit(1)

    input_file = sys.argv[1]

    logger.info(f"Loading secrets from {input_file}")
    requests, invalid_lines = load_requests_from_file(input_file)

    if not requests and not invalid_lines:
        print("No secrets found. Nothing to process.")

    entries = []

    for line in invalid_lines:
        entries.append({
            "scheme": None,
            "encoded": line,
            "status": ResultStatus.INVALID_INPUT.value,
            "plaintext": None,
            "reason": MISSING_FIELDS_REASON,
        })
        print(f"- {ResultStatus.INVALID_INPUT.value} {MISSING_FIELDS_REASON}")

    codec = SecretCodec()
    decoded_count = 0
    for request in requests:
        result = codec.decode(request)
        entries.append(result_entry(request.scheme, request.encoded_text, result))
        if result.success:
            decoded_count += 1
            print(f"{request.scheme} {result.status.value} {result.plaintext}")
        else:
            print(f"{request.scheme} {result.status.value} {result.failure_reason}")

    try:
        write_output(entries, config.OUTPUT_FILE)
    except OSError as e:
        logger.error(f"Failed to write output file: {e}")
        sys.exit(1)

    logger.info(
        f"Decoded {decoded_count} of {len(requests)} secrets "
        f"({len(invalid_lines)} invalid lines), results in {config.OUTPUT_FILE}"
    )


if __name__ == "__main__":
    main()
