from jsonreader.testing import jsonreader_path_cache  # noqa: F401
