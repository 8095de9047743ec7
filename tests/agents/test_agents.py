import io
import unittest

from royal_ur.agents import ClosestAgent, FarthestAgent, InteractiveAgent, parse_choice
from royal_ur.agents.registry import available, create
from royal_ur.engine.side import Side
from royal_ur.exceptions import EndOfInputError, MalformedInputError, UnknownAgentError


class TestScriptedAgents(unittest.TestCase):
    def setUp(self):
        self.me = Side.from_positions(4, {3, 9, 13}).view()
        self.other = Side().view()

    def test_farthest_picks_lowest_start(self):
        agent = FarthestAgent()
        self.assertEqual(agent.name, "Farthest")
        self.assertEqual(agent.choose_move(self.me, self.other, 2, {0, 9, 13}), 0)
        self.assertEqual(agent.choose_move(self.me, self.other, 2, {9, 13}), 9)

    def test_closest_picks_highest_start(self):
        agent = ClosestAgent()
        self.assertEqual(agent.name, "Closest")
        self.assertEqual(agent.choose_move(self.me, self.other, 2, {0, 9, 13}), 13)
        self.assertEqual(agent.choose_move(self.me, self.other, 2, {0}), 0)

    def test_empty_options_pass(self):
        self.assertIsNone(FarthestAgent().choose_move(self.me, self.other, 1, set()))
        self.assertIsNone(ClosestAgent().choose_move(self.me, self.other, 1, set()))


class TestInteractiveAgent(unittest.TestCase):
    def make_agent(self, text):
        self.out = io.StringIO()
        return InteractiveAgent(name="Sam", input=io.StringIO(text), output=self.out)

    def test_accepts_valid_choice(self):
        agent = self.make_agent("9\n")
        me = Side.from_positions(5, {3, 9})
        choice = agent.choose_move(me.view(), Side().view(), 3, frozenset({0, 3, 9}))
        self.assertEqual(choice, 9)
        transcript = self.out.getvalue()
        self.assertIn("Hello, Sam!", transcript)
        self.assertIn("You rolled a 3.", transcript)
        self.assertIn("> 0\n> 3\n> 9\n", transcript)
        self.assertIn(".T..50..\n....T...\n....70..", transcript)

    def test_retries_malformed_and_invalid_input(self):
        agent = self.make_agent("abc\n\n7\n 0 \n")
        choice = agent.choose_move(Side().view(), Side().view(), 2, frozenset({0}))
        self.assertEqual(choice, 0)
        transcript = self.out.getvalue()
        self.assertEqual(transcript.count("Illegal format."), 2)
        self.assertEqual(transcript.count("Invalid option."), 1)
        self.assertEqual(transcript.count("Please try again: "), 3)

    def test_end_of_input(self):
        agent = self.make_agent("x\n")
        with self.assertRaises(EndOfInputError):
            agent.choose_move(Side().view(), Side().view(), 2, frozenset({0}))
        with self.assertRaises(EOFError):
            self.make_agent("").choose_move(
                Side().view(), Side().view(), 2, frozenset({0})
            )

    def test_parse_choice(self):
        self.assertEqual(parse_choice(" 12\n"), 12)
        with self.assertRaises(MalformedInputError):
            parse_choice("3.5")


class TestRegistry(unittest.TestCase):
    def test_create_by_name(self):
        self.assertIsInstance(create("farthest"), FarthestAgent)
        self.assertIsInstance(create("CLOSEST"), ClosestAgent)
        human = create("human", name="Sam")
        self.assertIsInstance(human, InteractiveAgent)
        self.assertEqual(human.name, "Sam")

    def test_unknown_agent(self):
        with self.assertRaises(UnknownAgentError):
            create("minimax")
        with self.assertRaises(KeyError):
            create("minimax")

    def test_available_hides_human_by_default(self):
        self.assertEqual(set(available()), {"farthest", "closest"})
        self.assertIn("human", available(ignore_human=False))


if __name__ == "__main__":
    unittest.main()
