import unittest
import os
import h5py

from itersolve import IterSolve
from itersolve.typing import MatrixOperator, JacobiPreconditioner, ConvergenceHistory
from utils import backends, rand_data

path = os.path.dirname(__file__)
class TestIO(unittest.TestCase):

    def setUp(self) -> None:
        self.itersolve = [IterSolve(backend) for backend in backends]
        self.sizes = [(1, 1), (5, 5), (4, 9)]

        os.makedirs(f"{path}/data", exist_ok=True)
        self.file = h5py.File(f"{path}/data/test_io.h5", "w")

    def tearDown(self) -> None:
        self.file.close()
        os.remove(f"{path}/data/test_io.h5")
        os.rmdir(f"{path}/data")

    def test_matrix_operator(self) -> None:
        for its in self.itersolve:
            xp = its.namespace
            for rows, cols in self.sizes:
                name = f"matrix_{rows}_{cols}"
                group = self.file.create_group(name)

                ref = its.matrix_operator(rand_data(xp, rows, cols))
                its.write(group, ref)
                op = its.read(group, MatrixOperator)

                self.assertEqual(op.row_dimension, rows)
                self.assertEqual(op.column_dimension, cols)
                self.assertTrue(xp.all(xp.equal(op.data, ref.data)))

                del self.file[name]

    def test_jacobi(self) -> None:
        for its in self.itersolve:
            xp = its.namespace
            group = self.file.create_group("jacobi")

            ref = its.jacobi_preconditioner(its.matrix_operator([[2.0, 1.0], [1.0, 3.0]]))
            its.write(group, ref)
            m = its.read(group, JacobiPreconditioner)
            self.assertTrue(xp.all(xp.equal(m.diag, ref.diag)))

            with self.assertRaises(ValueError):
                its.read(group, MatrixOperator)

            del self.file["jacobi"]

    def test_history(self) -> None:
        for its in self.itersolve:
            group = self.file.create_group("history")

            a = its.matrix_operator([[4.0, 1.0], [1.0, 3.0]])
            solver = its.conjugate_gradient(max_iterations=10, delta=1e-12)
            ref = its.convergence_history()
            solver.iteration_manager.add_listener(ref)
            solver.solve(a, its.vector([1.0, 2.0]))

            its.write(group, ref)
            history = its.read(group, ConvergenceHistory)
            self.assertEqual(history.iterations, ref.iterations)
            self.assertEqual(history.norms, ref.norms)
            self.assertTrue(history.converged)

            del self.file["history"]

    def test_invalid(self) -> None:
        for its in self.itersolve:
            group = self.file.create_group("invalid")
            with self.assertRaises(ValueError):
                its.write(group, "not an operator")
            with self.assertRaises(ValueError):
                its.read(group, str)
            del self.file["invalid"]

if __name__ == "__main__":
    unittest.main()
