import pytest

from furiousapi.orderby.models import MappingRule, new_mapping_rule


@pytest.fixture()
def mapping() -> dict:
    return {
        "uid": new_mapping_rule(False, "uid"),
        "username": new_mapping_rule(False, "firstname", "lastname"),
        "age": new_mapping_rule(True, "birthday"),
    }


@pytest.fixture()
def cypher_mapping() -> dict:
    return {
        "uid": new_mapping_rule(False, "p.uid"),
        "username": new_mapping_rule(False, "p.firstname", "p.lastname"),
        "age": new_mapping_rule(True, "u.birthday"),
    }


@pytest.fixture()
def empty_rule() -> MappingRule:
    return new_mapping_rule(False, "", "   ")
