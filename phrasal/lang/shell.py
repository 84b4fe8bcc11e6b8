"""Handles interactive/command-line mode for phrasal. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """phrasal shell. Every line typed is program text; the program runs once the sentinel line is typed."""
    prompt = ""

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.intro = f"Type your code (type '{sess.sentinel}' to run):"

    def onecmd(self, line):
        """Lines are never shell commands, so cmd's dispatch is bypassed and every line goes to default."""
        return self.default(line)

    def default(self, line):
        """Adds line to the session, and runs the program if line completed it. cmd reports end of input as 'EOF'."""
        if line == "EOF" or self.sess.add(line):
            return self.do_exit("")
        return False

    def do_exit(self, arg):
        """Runs program and exits interpreter."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.run(stdin=self.stdin, stdout=self.stdout)
        return True
