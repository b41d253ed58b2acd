import networkx as nx

from bokeh_models.core.models.core import ToBokeh


def model_to_node(input: ToBokeh) -> str:
    # identity, not equality: equal but distinct models are separate nodes
    return f"m~{input.view_model}~{id(input)}"


class ReferenceGraph(nx.DiGraph):
    """Models reachable from one or more roots, edges pointing parent to child."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.models: dict[str, ToBokeh] = {}
        self.roots: list[str] = []

    def add_model_node(self, model: ToBokeh) -> str:
        node_name = model_to_node(model)
        if node_name not in self.models:
            self.models[node_name] = model
            super().add_node(node_name, model=model)
        return node_name

    def remove_node(self, n) -> None:
        if n in self.models:
            del self.models[n]
        if n in self.roots:
            self.roots.remove(n)
        super().remove_node(n)

    def add_root(self, model: ToBokeh) -> str:
        """Add `model` and everything it references."""
        root = self.add_model_node(model)
        if root not in self.roots:
            self.roots.append(root)
        stack = [model]
        visited: set[str] = set()
        while stack:
            current = stack.pop()
            current_node = model_to_node(current)
            if current_node in visited:
                continue
            visited.add(current_node)
            for child in current.children():
                child_node = self.add_model_node(child)
                self.add_edge(current_node, child_node)
                stack.append(child)
        return root

    def ordered_models(self) -> list[ToBokeh]:
        """Depth first preorder from each root in turn, each model once."""
        seen: set[str] = set()
        out: list[ToBokeh] = []
        for root in self.roots:
            for node in nx.dfs_preorder_nodes(self, source=root):
                if node in seen:
                    continue
                seen.add(node)
                out.append(self.models[node])
        return out
