# tests/unit/test_derived.py
"""
Unit tests for derived fields and template substitution
"""

import pytest

from jobgen import EngineOptions, JobSpec, TemplateSubstitutionError
from jobgen.derived import derive_fields, template_context
from jobgen.templating import render_template


class TestDeriveFields:
    """Test DerivedFields computation"""

    @pytest.mark.parametrize("nodes,ranks", [(0, 0), (0, 4), (3, 0), (1, 1), (2, 4), (16, 48)])
    def test_total_ranks(self, nodes, ranks):
        spec = JobSpec(node_count=nodes, ranks_per_node=ranks)
        assert derive_fields(spec).total_ranks == nodes * ranks

    def test_tasks_per_node(self):
        assert derive_fields(JobSpec(ranks_per_node=0)).tasks_per_node == 1
        assert derive_fields(JobSpec(ranks_per_node=4)).tasks_per_node == 4

    def test_walltime_text(self, sample_spec):
        assert derive_fields(sample_spec).walltime_text == "01:01:01"

    def test_flat_log_paths(self, full_spec):
        derived = derive_fields(full_spec)
        assert derived.output_file == "/home/user/logs/lbm.out"
        assert derived.error_file == "/home/user/logs/lbm.err"

    def test_nested_log_paths(self, full_spec):
        derived = derive_fields(full_spec, EngineOptions(log_layout="nested"))
        assert derived.output_file == "/home/user/logs/lbm/lbm.out"
        assert derived.error_file == "/home/user/logs/lbm/lbm.err"

    def test_no_log_directory(self, sample_spec):
        derived = derive_fields(sample_spec)
        assert derived.output_file == "run1.out"
        assert derived.error_file == "run1.err"

    def test_paths_not_created(self, temp_dir):
        spec = JobSpec(name="x", log_directory=str(temp_dir / "logs"))
        derive_fields(spec, EngineOptions(log_layout="nested"))
        assert not (temp_dir / "logs").exists()

    def test_fresh_each_call(self, sample_spec):
        assert derive_fields(sample_spec) == derive_fields(sample_spec)
        assert derive_fields(sample_spec) is not derive_fields(sample_spec)


class TestTemplating:
    """Test substitution of derived values"""

    def test_context(self, sample_spec):
        context = template_context(sample_spec, derive_fields(sample_spec))
        assert context["total_ranks"] == 8
        assert context["threads_per_process"] == 2
        assert context["walltime"] == "01:01:01"
        assert context["output_file"] == "run1.out"

    def test_render(self):
        assert render_template("-n {{ total_ranks }}", {"total_ranks": 8}, "task") == "-n 8"

    def test_plain_text_untouched(self):
        text = "echo $HOME ${SCRATCH} 100%"
        assert render_template(text, {}, "task") == text

    def test_shell_variables_survive_rendering(self):
        text = "cp ${INPUT} out_{{ name }}"
        assert render_template(text, {"name": "a"}, "task") == "cp ${INPUT} out_a"

    def test_undefined_field(self):
        with pytest.raises(TemplateSubstitutionError, match="task template") as excinfo:
            render_template("{{ nodes }}", {"total_ranks": 8}, "task")
        assert excinfo.value.segment == "task"
        assert excinfo.value.__cause__ is not None

    def test_syntax_error(self):
        with pytest.raises(TemplateSubstitutionError) as excinfo:
            render_template("{{ total_ranks ", {"total_ranks": 8}, "header")
        assert excinfo.value.segment == "header"
        assert excinfo.value.template == "{{ total_ranks "
