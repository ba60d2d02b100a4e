from promptgen.resources.library import ScriptLibrary

__all__ = ["ScriptLibrary"]
