"""Shared fixtures for the nsp_segmenter test suite."""

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


# Regression scenario: 23 entries, 57-character sentence, 37346 paths at n_path=10
ORACLE_DICTIONARY = frozenset({
    "围城", "故事", "1920", "1940", "年代", "主角", "方泓渐", "中国", "男方",
    "乡绅", "中国男方", "家庭", "乡绅家庭", "迫于", "青年", "青年人", "压力",
    "家庭压力", "同乡", "周家", "女子", "女子定亲", "定亲",
})
ORACLE_SENTENCE = (
    "围城故事发生于1920到1940年代。主角方鸿渐是个从中国南方乡绅家庭走出的青年人，"
    "迫于家庭压力与同乡周家女子订亲"
)
ORACLE_N_PATH = 10
ORACLE_RESULT_COUNT = 37346


@pytest.fixture
def oracle_dictionary():
    return ORACLE_DICTIONARY


@pytest.fixture
def oracle_sentence():
    return ORACLE_SENTENCE


@pytest.fixture
def small_dictionary():
    """Dictionary giving 'abc' two segmentations of two words."""
    return frozenset({"ab", "bc"})


@pytest.fixture
def dictionary_file(tmp_path):
    """Plain-text dictionary in jieba format."""
    path = tmp_path / "dict.txt"
    path.write_text(
        "# test dictionary\n围城 100 n\n故事 80 n\n\nab\nbc\n",
        encoding="utf-8",
    )
    return path
