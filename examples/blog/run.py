"""Create, read and update posts through generated functions.

Run from this directory: ``python run.py``. Then try
``crudgen inspect --config resources.yaml``.
"""
from blog import posts
from crudgen.binding import resources


def main() -> None:
    author = posts.create_author_or_raise({"name": "Ada", "email": "ada@example.com"})
    post = posts.create_blog_post_or_raise({"title": "Hello", "author_id": author.id})
    posts.update_blog_post_or_raise(post, {"published": True})
    for item in posts.all_blog_posts({"where": {"published": True}}):
        print(f"{item.id}: {item.title} by {posts.get_author(item.author_id).name}")
    for resource in resources(posts):
        print(resource.schema_name, ", ".join(resource.descriptions))


if __name__ == "__main__":
    main()
