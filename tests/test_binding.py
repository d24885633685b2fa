import builtins
import dataclasses
import types

import pytest

from crudgen.backends import InMemoryRepository
from crudgen.binding import PRIMITIVES, bind_resource, python_name, resources
from crudgen.core import ChangesetInvalid, InvalidSelector, NameConflict, RecordNotFound
from crudgen.registry import registry

from schemas import BlogPost, User


def _host(name: str = "accounts") -> types.ModuleType:
    return types.ModuleType(name)


def test_python_name_renders_bang_as_or_raise() -> None:
    assert python_name("create_user!") == "create_user_or_raise"
    assert python_name("get_user_by!") == "get_user_by_or_raise"
    assert python_name("all_users") == "all_users"


def test_bind_all_functions(memory_repository) -> None:
    host = _host()
    bound = bind_resource(host, "memory", User)
    assert bound.repository == "memory"
    assert len(bound.descriptions) == 12
    for attribute in (
        "all_users",
        "get_user",
        "get_user_or_raise",
        "get_user_by",
        "get_user_by_or_raise",
        "create_user",
        "create_user_or_raise",
        "update_user",
        "update_user_or_raise",
        "delete_user",
        "delete_user_or_raise",
        "change_user",
    ):
        assert callable(getattr(host, attribute)), attribute
    assert host.create_user_or_raise.__crudgen_description__ == "create_user!/1"
    assert host.create_user.__name__ == "create_user"


def test_generated_functions_round_trip(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)

    ada = host.create_user_or_raise({"name": "Ada", "email": "ada@example.com"})
    assert ada.id == 1
    assert host.get_user(1) == ada
    assert host.get_user_by({"email": "ada@example.com"}) == ada
    assert host.all_users() == [ada]

    updated = host.update_user_or_raise(ada, {"age": 36})
    assert updated.age == 36
    assert host.get_user_or_raise(1).age == 36

    deleted = host.delete_user_or_raise(updated)
    assert deleted.id == 1
    assert host.get_user(1) is None
    assert host.all_users() == []


def test_non_strict_writes_return_changesets(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)

    invalid = host.create_user({"name": "Nobody"})
    assert not invalid.valid
    assert invalid.errors == {"email": ["can't be blank"]}
    assert invalid.record is None
    assert host.all_users() == []

    created = host.create_user({"name": "Grace", "email": "grace@example.com"})
    assert created.valid
    assert created.action == "insert"
    assert created.record.id == 1


def test_strict_variants_raise(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)
    with pytest.raises(RecordNotFound):
        host.get_user_or_raise(99)
    with pytest.raises(RecordNotFound):
        host.get_user_by_or_raise({"name": "nobody"})
    with pytest.raises(ChangesetInvalid) as exc:
        host.create_user_or_raise({"nickname": "x"})
    assert "nickname" in exc.value.changeset.errors
    assert "is not a field" in str(exc.value)
    ghost = User(name="Ghost", email="ghost@example.com", id=42)
    with pytest.raises(ChangesetInvalid):
        host.delete_user_or_raise(ghost)
    with pytest.raises(ChangesetInvalid):
        host.update_user_or_raise(ghost, {"age": 1})


def test_change_builds_changeset_without_persisting(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)
    changeset = host.change_user()
    assert changeset.schema is User
    assert not changeset.valid
    record = User(name="Ada", email="ada@example.com", id=7)
    changeset = host.change_user(record, {"age": 5})
    assert changeset.valid
    assert changeset.apply().age == 5
    assert host.all_users() == []


def test_all_query_options(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)
    for name, age in (("a", 30), ("b", 10), ("c", 20)):
        host.create_user_or_raise({"name": name, "email": f"{name}@example.com", "age": age})
    assert [user.name for user in host.all_users({"order_by": "age"})] == ["b", "c", "a"]
    assert [user.name for user in host.all_users({"order_by": "-age", "limit": 2})] == ["a", "c"]
    assert [user.name for user in host.all_users({"where": {"age": 10}})] == ["b"]
    with pytest.raises(ValueError):
        host.all_users({"preload": ["posts"]})


def test_selector_options(memory_repository) -> None:
    read_host = _host("reader")
    bind_resource(read_host, memory_repository, User, preset="read")
    assert hasattr(read_host, "get_user_by_or_raise")
    assert not hasattr(read_host, "create_user")

    only_host = _host("only")
    bind_resource(only_host, memory_repository, User, only=["create"])
    assert hasattr(only_host, "create_user")
    assert not hasattr(only_host, "create_user_or_raise")

    except_host = _host("except")
    bind_resource(except_host, memory_repository, User, **{"except": ["delete", "delete!"]})
    assert not hasattr(except_host, "delete_user")
    assert hasattr(except_host, "update_user")

    with pytest.raises(InvalidSelector):
        bind_resource(_host("both"), memory_repository, User, only=["all"], preset="read")
    with pytest.raises(TypeError):
        bind_resource(_host("typo"), memory_repository, User, ony=["all"])


def test_suffix_disabled(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, BlogPost, suffix=False, preset="read")
    assert callable(host.all)
    assert callable(host.get_by_or_raise)
    assert host.all() == []


def test_multiple_resources_on_one_host(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)
    bind_resource(host, memory_repository, BlogPost, only=["all", "create!"])
    post = host.create_blog_post_or_raise({"title": "Hello"})
    assert host.all_blog_posts() == [post]
    listed = resources(host)
    assert [item.schema for item in listed] == [User, BlogPost]
    assert listed[1].descriptions == ("all_blog_posts/1", "create_blog_post!/1")
    assert listed[1].functions == {"all": "all_blog_posts", "create!": "create_blog_post_or_raise"}


def test_name_conflict_is_detected_before_binding(memory_repository) -> None:
    host = _host()
    host.get_user = lambda user_id: None
    with pytest.raises(NameConflict) as exc:
        bind_resource(host, memory_repository, User)
    assert "get_user" in str(exc.value)
    assert not hasattr(host, "all_users")
    assert resources(host) == []


def test_rebinding_replaces_previous_resource(memory_repository) -> None:
    host = _host()
    bind_resource(host, memory_repository, User)
    bind_resource(host, memory_repository, User)
    assert len(resources(host)) == 1


def test_same_named_schema_cannot_replace_bound_functions(memory_repository) -> None:
    Other = dataclasses.make_dataclass("User", [("login", str), ("id", int, dataclasses.field(default=None))])
    host = _host()
    bind_resource(host, memory_repository, User)
    original = host.get_user
    with pytest.raises(NameConflict) as exc:
        bind_resource(host, memory_repository, Other)
    assert "get_user" in str(exc.value)
    assert host.get_user is original
    assert [item.schema for item in resources(host)] == [User]
    created = host.create_user_or_raise({"name": "Ada", "email": "ada@example.com"})
    assert isinstance(created, User)


def test_existing_none_attribute_is_a_conflict(memory_repository) -> None:
    host = _host()
    host.get_user = None
    with pytest.raises(NameConflict):
        bind_resource(host, memory_repository, User)
    assert host.get_user is None
    assert not hasattr(host, "all_users")


def test_bind_onto_class_host(memory_repository) -> None:
    class Accounts:
        pass

    bind_resource(Accounts, memory_repository, User, preset="read_write")
    created = Accounts.create_user_or_raise({"name": "Ada", "email": "ada@example.com"})
    assert Accounts.get_user(created.id) == created


def test_binding_registers_resource(memory_repository) -> None:
    host = _host("billing")
    bound = bind_resource(host, memory_repository, User)
    assert registry.get("billing", "User") is bound
    assert ("billing", "User") in registry


def test_unknown_repository_name() -> None:
    with pytest.raises(KeyError):
        bind_resource(_host(), "postgres", User)


def test_separate_repositories_are_isolated() -> None:
    first, second = _host("first"), _host("second")
    bind_resource(first, InMemoryRepository(name="one"), User)
    bind_resource(second, InMemoryRepository(name="two"), User)
    first.create_user_or_raise({"name": "Ada", "email": "ada@example.com"})
    assert second.all_users() == []


def test_all_delegate_leaves_builtin_untouched(memory_repository) -> None:
    assert PRIMITIVES["all"].__name__ == "all_records"
    assert PRIMITIVES["all"] is not builtins.all
    assert PRIMITIVES["all"](memory_repository, User) == []
