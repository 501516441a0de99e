import pytest

from furiousapi.orderby.processors import (
    cypher_target_processor,
    default_source_processor,
    default_target_processor,
)


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        pytest.param("uid", ("uid", True), id="field only"),
        pytest.param("uid asc", ("uid", True), id="asc"),
        pytest.param("uid desc", ("uid", False), id="desc"),
        pytest.param("uid DeSc", ("uid", False), id="desc case insensitive"),
        pytest.param("uid xxx", ("uid", True), id="unknown direction"),
        pytest.param("uid desc xxx", ("uid", False), id="extra tokens ignored"),
        pytest.param("uid  desc", ("uid", True), id="double space is not a direction"),
    ],
)
def test_default_source_processor(source: str, expected: tuple):
    assert default_source_processor(source) == expected


def test_default_target_processor():
    assert default_target_processor("n.name", True) == "n.name ASC"
    assert default_target_processor("n.name", False) == "n.name DESC"


def test_cypher_target_processor():
    processor = cypher_target_processor(" n ")
    assert processor("firstname", True) == "n.firstname ASC"
    assert processor("lastname", False) == "n.lastname DESC"


@pytest.mark.parametrize("variable", ["", "  ", None])
def test_cypher_target_processor_without_variable(variable):
    assert cypher_target_processor(variable) is default_target_processor


def test_cypher_target_processor_per_destination_variables():
    processor = cypher_target_processor("n", {"birthday": " u ", "lastname": ""})
    assert processor("birthday", True) == "u.birthday ASC"
    assert processor("firstname", False) == "n.firstname DESC"
    assert processor("lastname", True) == "n.lastname ASC"


def test_cypher_target_processor_only_per_destination_variables():
    processor = cypher_target_processor("", {"birthday": "u"})
    assert processor("birthday", False) == "u.birthday DESC"
    assert processor("uid", True) == "uid ASC"
