class ConvergenceError(RuntimeError):
    """
    Raised when an iterative expansion does not reach its relative
    convergence criterion within the allowed number of iterations.

    Arguments:
        routine (str): Name of the expansion that failed
        a (float): Shape parameter it was evaluated at
        x (float): Argument it was evaluated at
        iterations (int): Number of iterations performed

    """

    def __init__(self, routine, a, x, iterations):
        self.routine = routine
        self.a = a
        self.x = x
        self.iterations = iterations
        err_msg = "{0}(a={1}, x={2}) did not converge after {3} iterations"
        super().__init__(err_msg.format(routine, a, x, iterations))
