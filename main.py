import argparse
import sys

from qoi_decoder import QOIError, check_end_marker, pixels_to_bytes, read_qoi


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Decode a QOI image into raw RGBA bytes (4 bytes per pixel, row-major).",
    )
    parser.add_argument("input", help="QOI file to decode")
    parser.add_argument("output", help="raw RGBA file to create (must not exist)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail unless the stream ends with the QOI end marker",
    )
    return parser


def decode_file(input_path: str, output_path: str, strict: bool = False) -> dict:
    """Decode ``input_path`` and write its pixels to ``output_path``."""
    with open(input_path, "rb") as f:
        header, pixels = read_qoi(f)
        if strict and not check_end_marker(f):
            raise QOIError("QOI.decode: Missing end marker")

    # "x" refuses to overwrite an existing file
    with open(output_path, "xb") as f:
        f.write(pixels_to_bytes(pixels, 4))

    return header.as_description()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        desc = decode_file(args.input, args.output, strict=args.strict)
    except FileNotFoundError as e:
        print(f"Error: Could not find file {e.filename}", file=sys.stderr)
        return 1
    except FileExistsError as e:
        print(f"Error: File {e.filename} already exists", file=sys.stderr)
        return 1
    except PermissionError as e:
        print(f"Error: Not permitted to access {e.filename}", file=sys.stderr)
        return 1
    except QOIError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(
        f"Decoded {args.input}: {desc['width']}x{desc['height']} "
        f"Channels: {desc['channels']} -> {args.output}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
