"""
Output directory utilities.
"""

from pathlib import Path


def setup_output_dir(output_dir="./"):
    """
    Resolve and create the directory where histogram files are written.

    Args:
        output_dir: Target directory, relative or absolute (default: current directory)

    Returns:
        Path of the (now existing) directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def histogram_file_path(name, output_dir="./", suffix=".histo"):
    """
    Build the path of a saved histogram, ``<output_dir>/<name><suffix>``.

    Args:
        name: Histogram name, used as file stem
        output_dir: Target directory
        suffix: File extension

    Returns:
        Path of the histogram file (the directory is not created)
    """
    if not name:
        raise ValueError("A histogram needs a name to be saved")
    return Path(output_dir) / f"{name}{suffix}"
