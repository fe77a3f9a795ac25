from rowframe import Table
from rowframe.compute import MeanAggregation

df = Table([
  [1, "John", 25, "Rome"],
  [2, "Jane", 30, "Milan"],
  [3, "Sam", 28, "Rome"],
], ["ID", "Name", "Age", "City"])

df.head()
print(df.shape, df.dtypes)

adults = df.filter(lambda row: row["Age"] > 26).sort_by(["Age"], ascending=False)
adults.head()

for group in df.group_by(["City"]).get("column1"):
  print(Table(group).aggregate({"City": lambda v: v[0], "Age": MeanAggregation()}))

print("mean", df.mean("Age"), "median", df.median("Age"), "std", df.std("Age"))
print("mode", df.mode("Age"))

df.to_csv("output.csv")
df.to_json("output.json")
print(Table.open_csv("output.csv"))
