"""Tests for association bindings and index statements."""

from modelgen.generator.classifier import classify_all
from modelgen.generator.types import resolve_all
from modelgen.generator.partition import partition
from modelgen.generator.associations import (
    strip_id_suffix,
    relationship_name,
    derive_associations,
    derive_indexes,
)
from modelgen.naming.inflector import inflect


def _refs(*tokens):
    assocs, _ = partition(resolve_all(classify_all(list(tokens))))
    return assocs


def test_strip_id_suffix():
    """Test that only a literal trailing _id is removed."""
    assert strip_id_suffix("user_id") == "user"
    assert strip_id_suffix("author") == "author"
    assert strip_id_suffix("id_card_id") == "id_card"
    assert strip_id_suffix("paid") == "paid"
    assert strip_id_suffix("user_idx") == "user_idx"


def test_single_association():
    """Test user_id:references:users."""
    assocs = derive_associations(_refs("user_id:references:users"), inflect)
    assert len(assocs) == 1
    assoc = assocs[0]
    assert assoc.field_name == "user"
    assert assoc.foreign_key_column == "user_id"
    assert assoc.target_table == "users"
    assert assoc.target_module == "app.models.user.User"
    assert assoc.relationship_name == "user"


def test_association_uses_inflector():
    """Test that the target module comes from the naming collaborator."""
    seen = []

    def fake_inflect(name):
        seen.append(name)
        return inflect(name, base="blog")

    assocs = derive_associations(_refs("blog_post_id:references:blog_posts"), fake_inflect)
    assert seen == ["blog_post"]
    assert assocs[0].target_module == "blog.models.blog_post.BlogPost"


def test_key_without_id_suffix():
    """Test a reference whose key has no _id suffix."""
    assocs = derive_associations(_refs("owner:references:users"), inflect)
    assert assocs[0].field_name == "owner"
    assert assocs[0].foreign_key_column == "owner"
    assert assocs[0].relationship_name == "owner_ref"


def test_relationship_name_differs_from_column():
    """Test that the relationship attribute never shadows the FK column."""
    assert relationship_name("user_id") == "user"
    assert relationship_name("owner") == "owner_ref"
    assert relationship_name("id_card_id") == "id_card"


def test_associations_keep_order():
    """Test that bindings follow input order."""
    refs = _refs("post_id:references:posts", "author_id:references:users")
    assocs = derive_associations(refs, inflect)
    assert [a.field_name for a in assocs] == ["post", "author"]
    assert [a.target_table for a in assocs] == ["posts", "users"]


def test_indexes_use_plural_and_raw_key():
    """Test one index statement per reference, on the raw column."""
    refs = _refs("user_id:references:users", "post_id:references:posts")
    indexes = derive_indexes("comments", refs)
    assert indexes == [
        'op.create_index("ix_comments_user_id", "comments", ["user_id"])',
        'op.create_index("ix_comments_post_id", "comments", ["post_id"])',
    ]


def test_no_references_no_indexes():
    """Test that plain attributes produce no indexes."""
    assert derive_indexes("users", []) == []
