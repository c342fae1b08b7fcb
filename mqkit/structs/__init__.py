"""Reflection over dataclass instances: tags, single fields, maps and value lists."""