from __future__ import annotations
import re
import sys
from bitmap import encode_bitmap
from colors import WHITE, parse_color
from errors import DuplicateIdentifierError, InvalidInputError, SceneError
from parser import parse_scene_file
from renderer import render_scene

SUCCESS = 0
ERR_USAGE = 1
ERR_READ_INPUT = 2
ERR_INVALID_INPUT = 3
ERR_DUPLICATE_ID = 4
ERR_WRITE_FILE = 5
ERR_OUT_OF_MEM = 6
ERR_UNRECOGNISED = 7

dimension_pattern = re.compile(r'^[+-]?[0-9]+$')

USAGE = "Usage: python main.py <input> <output> <width> <height> [options]"


def parse_dimension(value: str) -> int | None:
    if not dimension_pattern.match(value):
        return None
    number = int(value, 10)
    if number < 0:
        return None
    return number


def print_usage():
    print(USAGE)
    print("\nOptions:")
    print("  -v, --verbose            Print scene summary and progress")
    print("  -b, --background COLOR   Canvas color as RRGGBB or R,G,B (default: ffffff)")
    print("  --png PATH               Also save a PNG preview (requires Pillow)")
    print("\nExamples:")
    print("  python main.py scene.txt out.bmp 640 480")
    print("  python main.py scene.txt out.bmp 640 480 -b 0,0,0 --png out.png")


def save_png_preview(buffer, png_path: str, verbose: bool = False) -> bool:
    try:
        from PIL import Image
        image = Image.fromarray(buffer.to_rgb_array())
        image.save(png_path)
        if verbose:
            print(f"[OK] PNG preview saved: {png_path}")
        return True
    except ImportError:
        print("[WARNING] PIL/Pillow not installed. PNG preview skipped.")
        print("         Install with: pip install Pillow")
        return True
    except (OSError, ValueError):
        print(f"Error: could not write file \"{png_path}\".")
        return False


def draw_scene_file(input_path: str, output_path: str, width: int, height: int,
                    background: int = WHITE, png_path: str = None,
                    verbose: bool = False) -> int:
    try:
        scene = parse_scene_file(input_path)
    except (OSError, UnicodeDecodeError):
        print(f"Error: could not read input file \"{input_path}\".")
        return ERR_READ_INPUT
    except DuplicateIdentifierError as e:
        print(f"Error: duplicate ID \"{e.identifier}\".")
        return ERR_DUPLICATE_ID
    except InvalidInputError as e:
        print(f"Error: invalid entry on line {e.line_number}.")
        return ERR_INVALID_INPUT
    except SceneError as e:
        if verbose:
            print(f"Error while parsing: {e}")
        print("Error: Unrecognised error.")
        return ERR_UNRECOGNISED
    except MemoryError:
        print("Error: out of memory.")
        return ERR_OUT_OF_MEM

    if verbose:
        print(f"\nProcessing: {input_path}")
        scene.print_summary()
        print(f"Canvas: {width}x{height}")
        print(f"Output will be: {output_path}")

    try:
        buffer = render_scene(scene, width, height, background)
    except MemoryError:
        print("Error: out of memory.")
        return ERR_OUT_OF_MEM
    except SceneError as e:
        if verbose:
            print(f"Error during rendering: {e}")
            import traceback
            traceback.print_exc()
        print("Error: Unrecognised error.")
        return ERR_UNRECOGNISED

    try:
        with open(output_path, 'wb') as output:
            output.write(encode_bitmap(buffer))
    except OSError:
        print(f"Error: could not write file \"{output_path}\".")
        return ERR_WRITE_FILE

    if verbose:
        print(f"[OK] Rendered and saved: {output_path}")

    if png_path is not None and not save_png_preview(buffer, png_path, verbose):
        return ERR_WRITE_FILE

    return SUCCESS


def main(argv: list[str] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    verbose = False
    background = WHITE
    png_path = None
    positional = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['-v', '--verbose']:
            verbose = True
        elif arg in ['-b', '--background']:
            if i + 1 < len(args):
                try:
                    background = parse_color(args[i + 1])
                except ValueError:
                    print("Error: Background must be RRGGBB or R,G,B (e.g., 255,255,255)")
                    return ERR_USAGE
                i += 1
            else:
                print("Error: -b/--background requires a color")
                return ERR_USAGE
        elif arg == '--png':
            if i + 1 < len(args):
                png_path = args[i + 1]
                i += 1
            else:
                print("Error: --png requires a path argument")
                return ERR_USAGE
        elif arg in ['-h', '--help']:
            print_usage()
            return SUCCESS
        elif arg.startswith('-') and parse_dimension(arg) is None:
            print(f"Unknown option: {arg}")
            print(USAGE)
            return ERR_USAGE
        else:
            positional.append(arg)
        i += 1

    if len(positional) != 4:
        print(USAGE)
        return ERR_USAGE

    input_path, output_path = positional[0], positional[1]
    width = parse_dimension(positional[2])
    height = parse_dimension(positional[3])
    if width is None or height is None:
        print(USAGE)
        return ERR_USAGE

    return draw_scene_file(input_path, output_path, width, height,
                           background, png_path, verbose)


if __name__ == "__main__":
    sys.exit(main())
