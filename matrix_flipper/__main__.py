from .args import parse_args
from .transformations import flip_matrix_2d
from .viz import print_matrix


def main(argv=None):
    args = parse_args(argv)
    matrix = args["grid"]
    color = args["color"]

    axes = ["h", "v"] if args["axis"] == "both" else [args["axis"]]

    print_matrix(matrix, title="Input", color=color)
    for axis in axes:
        flipped = getattr(flip_matrix_2d, axis)(matrix)
        print()
        print_matrix(flipped, title=f"Flip {axis}", color=color)


if __name__ == "__main__":
    main()
