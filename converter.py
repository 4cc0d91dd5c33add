import sys

from qoi_decoder import read_qoi, to_image

INPUT_QOI = "fruits.qoi"
OUTPUT_PNG = "fruits_converted.png"


def qoi_to_png(qoi_path, png_path):
    with open(qoi_path, "rb") as f:
        header, pixels = read_qoi(f)

    img = to_image(pixels, header)
    img.save(png_path, format="PNG")
    print(f"Converted {qoi_path} to {png_path}")
    return img


if __name__ == "__main__":
    if len(sys.argv) == 3:
        qoi_to_png(sys.argv[1], sys.argv[2])
    else:
        qoi_to_png(INPUT_QOI, OUTPUT_PNG)
