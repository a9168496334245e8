"""Tests for DiagramService and the command line entry point."""

import pytest

from umlloom.__main__ import main
from umlloom.core.diagrams import DiagramOutputError, DiagramService
from umlloom.core.model import InMemoryTypeModel

from .conftest import make_type


# =========================================================================
# Tests: DiagramService
# =========================================================================

class TestDiagramService:
    def test_diagram_for(self, type_model):
        puml = DiagramService(type_model).diagram_for("animals.Dog")
        assert puml.startswith("@startuml\nclass Dog")

    def test_unknown_type(self, type_model):
        with pytest.raises(ValueError, match="nope.Nope"):
            DiagramService(type_model).diagram_for("nope.Nope")

    def test_render_all_sorted(self, type_model):
        diagrams = DiagramService(type_model).render_all()
        assert list(diagrams) == ["animals.Animal", "animals.Dog", "pets.Pet"]

    def test_write_all(self, type_model, tmp_path):
        written = DiagramService(type_model).write_all(tmp_path)
        assert sorted(p.relative_to(tmp_path).as_posix() for p in written) == [
            "animals/Animal.puml",
            "animals/Dog.puml",
            "pets/Pet.puml",
        ]
        assert (tmp_path / "animals" / "Dog.puml").read_text(encoding="utf-8").endswith("@enduml\n")

    def test_nested_and_default_package_paths(self, tmp_path):
        outer = make_type("a.Outer")
        inner = make_type("a.Outer.Inner", package="a", enclosing_type="a.Outer")
        loose = make_type("Loose")
        written = DiagramService(InMemoryTypeModel([outer, inner, loose])).write_all(tmp_path)
        assert sorted(p.relative_to(tmp_path).as_posix() for p in written) == [
            "Loose.puml",
            "a/Outer.Inner.puml",
            "a/Outer.puml",
        ]

    def test_output_failure(self, type_model, tmp_path):
        blocker = tmp_path / "animals"
        blocker.write_text("not a directory")
        with pytest.raises(DiagramOutputError) as excinfo:
            DiagramService(type_model).write_all(tmp_path)
        assert "Animal.puml" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OSError)


# =========================================================================
# Tests: Command line
# =========================================================================

class TestMain:
    def test_generates_diagrams(self, tmp_path, capsys):
        src = tmp_path / "src" / "animals"
        src.mkdir(parents=True)
        (src / "Animal.java").write_text("package animals;\npublic abstract class Animal {}\n")
        (src / "Dog.java").write_text("package animals;\npublic class Dog extends Animal {}\n")
        out = tmp_path / "out"

        assert main([str(tmp_path / "src"), "-o", str(out), "--log-level", "WARNING"]) == 0
        dog = (out / "animals" / "Dog.puml").read_text(encoding="utf-8")
        assert 'Animal "" <|-- "" Dog' in dog
        assert "Wrote 2 diagrams" in capsys.readouterr().out

    def test_missing_source_dir(self, tmp_path):
        assert main([str(tmp_path / "missing")]) == 1
