from vdom_app.models.vdom import Node, Text


def render(node: Node) -> str:
    """
    Serialize a node to markup.
    Text is emitted verbatim and attribute values are not escaped;
    sanitize upstream if the content is untrusted.
    """
    if isinstance(node, Text):
        return node.content

    attrs = " ".join(f'{name}="{value}"' for name, value in node.attrs.items())
    children = "".join(render(child) for child in node.children)
    # the space before ">" is kept even with no attributes: <div >
    return f"<{node.tag} {attrs}>{children}</{node.tag}>"
