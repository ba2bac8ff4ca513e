"""Tests for UniquePersonList / UniqueCompanyList and their observable views."""

from dataclasses import replace

import pytest

from connectify.domain import (
    Company,
    CompanyNotFoundError,
    DuplicateCompanyError,
    DuplicateError,
    DuplicateListError,
    DuplicatePersonError,
    ElementNotFoundError,
    ListChange,
    PersonName,
    PersonNotFoundError,
    PersonPhone,
    PersonPriority,
    UniqueCompanyList,
    UniquePersonList,
)
from connectify.domain.comparators import person_by_name, person_by_priority

from helpers import ALICE, BENSON, CARL, make_person


def _list(*persons) -> UniquePersonList:
    persons_list = UniquePersonList()
    for p in persons:
        persons_list.add(p)
    return persons_list


def test_contains() -> None:
    persons = UniquePersonList()
    assert not persons.contains(ALICE)
    persons.add(ALICE)
    assert persons.contains(ALICE)
    assert persons.contains(replace(ALICE, phone=PersonPhone("11111111")))
    with pytest.raises(TypeError):
        persons.contains(None)


def test_add_duplicate_rejected_and_list_unchanged() -> None:
    persons = _list(ALICE)
    with pytest.raises(DuplicatePersonError):
        persons.add(replace(ALICE, priority=PersonPriority(5)))
    assert list(persons) == [ALICE]


def test_duplicate_errors_share_a_base() -> None:
    assert issubclass(DuplicatePersonError, DuplicateError)
    assert issubclass(PersonNotFoundError, ElementNotFoundError)


def test_set_element_replaces_in_place() -> None:
    persons = _list(ALICE, BENSON, CARL)
    edited = replace(BENSON, phone=PersonPhone("12345678"))
    persons.set_element(BENSON, edited)
    assert list(persons) == [ALICE, edited, CARL]


def test_set_element_may_rename_target() -> None:
    persons = _list(ALICE, BENSON)
    renamed = replace(ALICE, name=PersonName("Alicia"))
    persons.set_person(ALICE, renamed)
    assert list(persons) == [renamed, BENSON]


def test_set_element_missing_target() -> None:
    persons = _list(ALICE)
    with pytest.raises(PersonNotFoundError):
        persons.set_element(BENSON, BENSON)
    assert list(persons) == [ALICE]


def test_set_element_collision_with_other_element() -> None:
    persons = _list(ALICE, BENSON)
    with pytest.raises(DuplicatePersonError):
        persons.set_element(ALICE, replace(ALICE, name=BENSON.name))
    assert list(persons) == [ALICE, BENSON]


def test_no_op_edit_keeps_list_equal() -> None:
    persons = _list(ALICE, BENSON)
    before = list(persons)
    same = replace(ALICE)
    persons.set_element(ALICE, same)
    assert list(persons) == before
    assert persons.as_unmodifiable_observable_list()[0].id == ALICE.id


def test_remove_preserves_order_of_others() -> None:
    persons = _list(ALICE, BENSON, CARL)
    persons.remove(BENSON)
    assert list(persons) == [ALICE, CARL]
    with pytest.raises(PersonNotFoundError):
        persons.remove(BENSON)
    assert list(persons) == [ALICE, CARL]


def test_set_all_rejects_duplicates_atomically() -> None:
    persons = _list(ALICE)
    with pytest.raises(DuplicateListError):
        persons.set_all([BENSON, CARL, replace(BENSON, priority=PersonPriority(1))])
    assert list(persons) == [ALICE]

    persons.set_persons([CARL, BENSON])
    assert list(persons) == [CARL, BENSON]

    other = _list(ALICE)
    persons.set_all(other)
    assert persons == other


def test_sort_is_stable_on_ties() -> None:
    low_a = make_person("Anna", "anna@example.com", priority=1)
    high = make_person("Bob", "bob@example.com", priority=4)
    low_b = make_person("Cleo", "cleo@example.com", priority=1)
    persons = _list(low_a, high, low_b)

    persons.sort(key=person_by_priority)
    assert list(persons) == [high, low_a, low_b]

    persons.sort(key=person_by_name, reverse=True)
    assert list(persons) == [low_b, high, low_a]

    persons.sort(cmp=lambda a, b: a.rank() - b.rank())
    assert list(persons) == [low_b, low_a, high]


def test_view_is_live_and_read_only() -> None:
    persons = _list(ALICE)
    view = persons.as_unmodifiable_observable_list()
    persons.add(BENSON)
    assert list(view) == [ALICE, BENSON]
    assert len(view) == 2
    assert BENSON in view
    assert view[-1] == BENSON
    assert view[0:1] == (ALICE,)

    with pytest.raises(TypeError):
        view[0] = CARL
    with pytest.raises(AttributeError):
        view.append(CARL)
    with pytest.raises(TypeError):
        del view[0]


def test_view_notifies_subscribers() -> None:
    persons = _list(ALICE)
    view = persons.as_unmodifiable_observable_list()
    changes: list[ListChange] = []
    unsubscribe = view.subscribe(changes.append)

    persons.add(BENSON)
    persons.set_element(BENSON, replace(BENSON, priority=PersonPriority(0)))
    persons.remove(ALICE)
    persons.set_all([CARL])
    persons.sort(key=person_by_name)

    assert [c.kind for c in changes] == ["add", "set", "remove", "replace_all", "sort"]
    assert changes[0].items == (BENSON,)

    unsubscribe()
    persons.add(ALICE)
    assert len(changes) == 5


def test_failed_mutation_does_not_notify() -> None:
    persons = _list(ALICE)
    changes = []
    persons.as_unmodifiable_observable_list().subscribe(changes.append)
    with pytest.raises(DuplicatePersonError):
        persons.add(ALICE)
    with pytest.raises(PersonNotFoundError):
        persons.remove(BENSON)
    assert changes == []


def test_listener_error_raised_after_commit() -> None:
    persons = UniquePersonList()
    seen = []

    def broken(change):
        raise RuntimeError("listener failed")

    view = persons.as_unmodifiable_observable_list()
    view.subscribe(broken)
    view.subscribe(seen.append)
    with pytest.raises(RuntimeError):
        persons.add(ALICE)
    assert list(persons) == [ALICE]
    assert len(seen) == 1


def test_company_list_uses_company_errors() -> None:
    companies = UniqueCompanyList()
    acme = Company(name="Acme")
    companies.add(acme)
    with pytest.raises(DuplicateCompanyError):
        companies.add(Company(name="Acme", industry="Retail"))
    with pytest.raises(CompanyNotFoundError):
        companies.remove(Company(name="Initech"))
    companies.set_company(acme, acme.add_person_to_company(ALICE))
    assert companies.as_unmodifiable_observable_list()[0].persons == (ALICE,)
    with pytest.raises(DuplicateListError):
        companies.set_companies([acme, Company(name="Acme")])
