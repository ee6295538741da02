from pathlib import Path

path_tests = Path(__file__).parent
path_root = path_tests.parent
path_resources = path_tests.joinpath("__resources")

path_m3u_basic = path_resources.joinpath("basic").with_suffix(".m3u")
path_m3u_extended = path_resources.joinpath("extended").with_suffix(".m3u")


def read_resource(path: Path) -> str:
    """Read the text of a resource file exactly as stored"""
    with open(path, "r", encoding="utf-8", newline="") as file:
        return file.read()
