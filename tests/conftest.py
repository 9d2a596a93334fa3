import matplotlib
matplotlib.use('Agg')

import pytest

@pytest.fixture
def ini_file(tmp_path):
    def _write(content:str) -> str:
        path = tmp_path / 'user.ini'
        path.write_text(content)
        return str(path)
    return _write
