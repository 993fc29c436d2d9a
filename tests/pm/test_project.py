import os
from unittest import mock

from test_default import PmTest, touch

from bioproj.pm.core.shell import ShCommandHandler

class PmProjectTest(PmTest):
    def test_init(self):
        """Initialize a project folder with the prescribed layout"""
        path = self.init_project("j_doe_00_01")
        self.assertEqual(self.app.exit_code, 0)
        self.assertEqual(sorted(os.listdir(path)),
                         ["README.md", "Singularity", "Snakefile", "analysis", "data", "lib", "scripts"])
        for d in ["analysis", "data", "lib", "scripts"]:
            self.assertTrue(os.path.isdir(os.path.join(path, d)))
        self.assertEqual(os.listdir(os.path.join(path, "lib")), ["samples.tsv"])
        self.assertEqual(os.listdir(os.path.join(path, "analysis")), [])

    def test_init_seed_files(self):
        """Seed files are rendered with project information"""
        self._run_app(['project', 'init', 'j_doe_00_01', '--title', 'RNA-seq of mouse liver', '--description', 'Time course'])
        path = self.project_path("j_doe_00_01")
        with open(os.path.join(path, "README.md")) as fh:
            readme = fh.read()
        self.assertTrue(readme.startswith("# RNA-seq of mouse liver\n"))
        self.assertIn("Time course", readme)
        self.assertIn("Author: J. Doe", readme)
        with open(os.path.join(path, "Singularity")) as fh:
            singularity = fh.read()
        self.assertTrue(singularity.startswith("Bootstrap: docker\nFrom: continuumio/miniconda3\n"))
        self.assertIn("\n%labels\n", singularity)
        with open(os.path.join(path, "Snakefile")) as fh:
            self.assertIn("rule all:", fh.read())
        with open(os.path.join(path, "lib", "samples.tsv")) as fh:
            self.assertTrue(all(x.startswith("#") for x in fh))

    def test_init_container_image(self):
        """Container image without bootstrap agent defaults to docker"""
        self.config_defaults['project']['container_image'] = "ubuntu:22.04"
        path = self.init_project()
        with open(os.path.join(path, "Singularity")) as fh:
            self.assertTrue(fh.read().startswith("Bootstrap: docker\nFrom: ubuntu:22.04\n"))

    def test_init_no_overwrite(self):
        """Rerunning init restores missing entries but leaves existing files alone"""
        path = self.init_project()
        touch(os.path.join(path, "README.md"), "my notes\n")
        os.unlink(os.path.join(path, "Snakefile"))
        os.rmdir(os.path.join(path, "scripts"))
        self.init_project()
        self.assertEqual(self.app.exit_code, 0)
        with open(os.path.join(path, "README.md")) as fh:
            self.assertEqual(fh.read(), "my notes\n")
        self.assertTrue(os.path.isfile(os.path.join(path, "Snakefile")))
        self.assertTrue(os.path.isdir(os.path.join(path, "scripts")))

    def test_init_dry_run(self):
        """Dry run reports actions without touching the file system"""
        self._run_app(['project', 'init', 'j_doe_00_01', '-n'])
        self.assertFalse(os.path.exists(self.project_path("j_doe_00_01")))
        self.assertIn("(DRY_RUN): Make directory", self.stderr())
        self.assertIn("(DRY_RUN): writing data to file", self.stderr())

    def test_init_file_in_the_way(self):
        touch(self.project_path("j_doe_00_01"))
        self._run_app(['project', 'init', 'j_doe_00_01'])
        self.assertEqual(self.app.exit_code, 1)

    def test_init_foreign_folder(self):
        """Non-empty folder that is not a project requires confirmation"""
        touch(self.project_path("j_doe_00_01", "notes.txt"))
        with mock.patch("bioproj.pm.core.project.query_yes_no", return_value=False):
            self._run_app(['project', 'init', 'j_doe_00_01'])
        self.assertEqual(os.listdir(self.project_path("j_doe_00_01")), ["notes.txt"])
        self._run_app(['project', 'init', 'j_doe_00_01', '--force'])
        self.assertTrue(os.path.isfile(self.project_path("j_doe_00_01", "Snakefile")))
        self.assertTrue(os.path.isfile(self.project_path("j_doe_00_01", "notes.txt")))

    def test_init_git(self):
        """Initialize git repository and write .gitignore"""
        with mock.patch.object(ShCommandHandler, "command") as command:
            path = self.init_project()
            command.assert_not_called()
            self._run_app(['project', 'init', 'j_doe_00_01', '-g'])
            command.assert_called_once_with(["git", "init"], cwd=path)
        with open(os.path.join(path, ".gitignore")) as fh:
            self.assertIn("/data/", fh.read().splitlines())

    def test_init_git_existing_repository(self):
        path = self.init_project()
        os.mkdir(os.path.join(path, ".git"))
        with mock.patch.object(ShCommandHandler, "command") as command:
            self._run_app(['project', 'init', 'j_doe_00_01', '-g'])
            command.assert_not_called()
        self.assertEqual(self.app.exit_code, 0)

    def test_init_git_failure(self):
        with mock.patch.object(ShCommandHandler, "command", side_effect=RuntimeError("Subprocess return code: 1")):
            self._run_app(['project', 'init', 'j_doe_00_01', '-g'])
        self.assertEqual(self.app.exit_code, 1)

    def test_ls(self):
        """List projects, skipping ignored entries"""
        self.init_project("j_doe_00_02")
        self.init_project("j_doe_00_01")
        os.mkdir(self.project_path("tmp"))
        os.mkdir(self.project_path(".cache"))
        touch(self.project_path("notes.txt"))
        self._run_app(['project', 'ls'])
        self.assertEqual(self.stdout(), "j_doe_00_01\nj_doe_00_02")

    def test_check_clean(self):
        self.init_project()
        self._run_app(['project', 'check', 'j_doe_00_01'])
        self.assertEqual(self.app.exit_code, 0)
        self.assertEqual(self.stdout(), "")

    def test_check_problems(self):
        """Report deviations from the project conventions"""
        path = self.init_project()
        os.unlink(os.path.join(path, "Singularity"))
        os.mkdir(os.path.join(path, "results"))
        touch(os.path.join(path, "analysis", "notes.txt"))
        touch(os.path.join(path, "analysis", "0001_qc.Rmd"))
        touch(os.path.join(path, "analysis", "0001_alignment.ipynb"))
        touch(os.path.join(path, "scripts", "0002_plots.Rmd"))
        with open(os.path.join(path, "lib", "samples.tsv"), "a") as fh:
            fh.write("P1_101\t/no/such/file.fastq.gz\n")
        self._run_app(['project', 'check', 'j_doe_00_01'])
        self.assertEqual(self.app.exit_code, 1)
        lines = self.stdout().splitlines()
        self.assertEqual([x.split()[0] for x in lines],
                         ["missing", "unexpected", "naming", "duplicate", "location", "samples"])
        self.assertIn("Singularity", lines[0])
        self.assertIn("results", lines[1])
        self.assertIn(os.path.join("analysis", "notes.txt"), lines[2])
        self.assertIn("0001_alignment.ipynb, 0001_qc.Rmd", lines[3])
        self.assertIn(os.path.join("scripts", "0002_plots.Rmd"), lines[4])
        self.assertIn("P1_101", lines[5])

    def test_check_missing_project(self):
        self._run_app(['project', 'check', 'j_doe_00_01'])
        self.assertEqual(self.app.exit_code, 1)
