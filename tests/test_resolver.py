import importlib.util
import unittest
from pathlib import Path


def _load_module(relative_path, module_name):
    repo_root = Path(__file__).resolve().parents[1]
    mod_path = repo_root / relative_path
    spec = importlib.util.spec_from_file_location(module_name, str(mod_path))
    module = importlib.util.module_from_spec(spec)
    assert spec and spec.loader
    spec.loader.exec_module(module)
    return module


resolver = _load_module(Path("Orchestrator") / "discovery" / "resolver.py", "resolver_mod")


class NormalizeAndTokenizeTests(unittest.TestCase):
    def test_normalize_keeps_alphanumerics_lowercased(self):
        self.assertEqual(resolver.normalize("PowerStig Converter UI"), "powerstigconverterui")
        self.assertEqual(resolver.normalize("MOF-Inspector_v2.exe"), "mofinspectorv2exe")
        self.assertEqual(resolver.normalize("  -._+ "), "")

    def test_tokens_split_on_delimiters_and_drop_empties(self):
        self.assertEqual(resolver.tokens("PowerStig Converter UI"), ["powerstig", "converter", "ui"])
        self.assertEqual(resolver.tokens("MOF--Inspector__Tool+x.y"), ["mof", "inspector", "tool", "x", "y"])
        self.assertEqual(resolver.tokens(""), [])


class ScoreTests(unittest.TestCase):
    def test_substring_token_and_prefix_points(self):
        # substring 100 + three shared tokens 30 + prefix 5
        self.assertEqual(resolver.score("PowerStig Converter UI", "PowerStig Converter UI"), 135)
        self.assertEqual(resolver.score("MOFInspectorTool", "MOF Inspector"), 105)
        self.assertEqual(resolver.score("Unrelated", "Foo Bar"), 0)

    def test_duplicate_target_tokens_each_count(self):
        self.assertEqual(resolver.score("ui-tool", "ui ui"), 10 + 10 + 5)

    def test_prefix_requires_candidate_first_token_to_start_with_target_first(self):
        self.assertEqual(resolver.score("inspector-mof", "mof inspector"), 20)
        self.assertEqual(resolver.score("mofx-other", "mof inspector"), 5)


class ResolveTests(unittest.TestCase):
    def test_resolves_substring_match(self):
        path = resolver.resolve(
            ["Apps/PowerStigConverterUI.exe", "Apps/MOF-Inspector.exe"], "PowerStig Converter UI"
        )
        self.assertEqual(path, "Apps/PowerStigConverterUI.exe")

    def test_resolves_with_confidence_at_least_substring_score(self):
        path, score = resolver.best_match(["Apps/MOFInspectorTool.exe"], "MOF Inspector")
        self.assertEqual(path, "Apps/MOFInspectorTool.exe")
        self.assertGreaterEqual(score, 100)

    def test_empty_candidates_not_found(self):
        self.assertIsNone(resolver.resolve([], "MOF Inspector"))
        self.assertIsNone(resolver.resolve(None, "MOF Inspector"))

    def test_unrelated_candidate_not_found(self):
        self.assertIsNone(resolver.resolve(["Unrelated.exe"], "Foo Bar"))

    def test_threshold_rejects_best_below_ten(self):
        # Only the prefix bonus fires: best score is 5.
        path, score = resolver.best_match(["mofx.exe", "zzz.exe"], "mof inspector")
        self.assertIsNone(path)
        self.assertEqual(score, 5)

    def test_single_shared_token_is_enough(self):
        self.assertEqual(resolver.resolve(["Inspector.exe"], "MOF Inspector"), "Inspector.exe")

    def test_substring_dominates_token_overlap(self):
        cands = ["Converter-UI-PowerStig-Legacy.exe", "PowerStigConverterUI.exe"]
        self.assertEqual(resolver.resolve(cands, "PowerStig Converter UI"), "PowerStigConverterUI.exe")

    def test_tie_keeps_first_candidate(self):
        cands = ["b/MOFInspector.exe", "a/MOFInspector.exe"]
        self.assertEqual(resolver.resolve(cands, "MOF Inspector"), "b/MOFInspector.exe")
        self.assertEqual(resolver.resolve(list(reversed(cands)), "MOF Inspector"), "a/MOFInspector.exe")

    def test_deterministic(self):
        cands = ["Apps/PowerStigConverterUI.exe", "Apps/MOF-Inspector.exe", "Apps/Other.exe"]
        first = resolver.best_match(cands, "MOF Inspector")
        for _ in range(5):
            self.assertEqual(resolver.best_match(cands, "MOF Inspector"), first)

    def test_accepts_candidate_objects(self):
        cand = resolver.CandidateExecutable.from_path("Apps/MOFInspector.exe")
        self.assertEqual(cand.file_name_without_extension, "MOFInspector")
        self.assertEqual(resolver.resolve([cand], "MOF Inspector"), "Apps/MOFInspector.exe")

    def test_target_without_alphanumerics_is_not_found(self):
        self.assertEqual(resolver.score("Anything", " -._+ "), 0)
        self.assertIsNone(resolver.resolve(["Anything.exe", "Other.exe"], " -._+ "))

    def test_extension_is_not_part_of_the_name(self):
        self.assertIsNone(resolver.resolve(["Apps/tool.exe"], "exe"))


if __name__ == "__main__":
    unittest.main()
